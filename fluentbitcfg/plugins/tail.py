"""The tail input plugin, which follows one or more text files."""

from __future__ import annotations

from dataclasses import dataclass, field

from .base import KVs, Plugin, SecretLoader


@dataclass(kw_only=True)
class Tail(Plugin):
    """Monitors text files, similar to ``tail -f``."""

    buffer_chunk_size: str = ""
    buffer_max_size: str = ""
    path: str = ""
    path_key: str = ""
    exclude_path: str = ""
    read_from_head: bool | None = None
    refresh_interval_seconds: int | None = None
    rotate_wait_seconds: int | None = None
    ignore_older: str = ""
    skip_long_lines: bool | None = None
    db: str = ""
    db_sync: str = ""
    mem_buf_limit: str = ""
    parser: str = ""
    key: str = ""
    tag: str = ""
    tag_regex: str = ""
    multiline: bool | None = None
    multiline_flush_seconds: int | None = None
    parser_firstline: str = ""
    parser_n: list[str] = field(default_factory=list)
    docker_mode: bool | None = None
    docker_mode_flush_seconds: int | None = None
    docker_mode_parser: str = ""
    disable_inotify_watcher: bool | None = None
    multiline_parser: str = ""
    storage_type: str = ""
    pause_on_chunks_overlimit: str = ""

    def name(self) -> str:
        return "tail"

    def params(self, sl: SecretLoader) -> KVs:
        kvs = KVs()
        optional = [
            ("Buffer_Chunk_Size", self.buffer_chunk_size),
            ("Buffer_Max_Size", self.buffer_max_size),
            ("Path", self.path),
            ("Path_Key", self.path_key),
            ("Exclude_Path", self.exclude_path),
        ]
        for key, value in optional:
            if value:
                kvs.insert(key, value)
        if self.read_from_head is not None:
            kvs.insert("Read_from_Head", self.read_from_head)
        if self.refresh_interval_seconds is not None:
            kvs.insert("Refresh_Interval", self.refresh_interval_seconds)
        if self.rotate_wait_seconds is not None:
            kvs.insert("Rotate_Wait", self.rotate_wait_seconds)
        if self.ignore_older:
            kvs.insert("Ignore_Older", self.ignore_older)
        if self.skip_long_lines is not None:
            kvs.insert("Skip_Long_Lines", self.skip_long_lines)
        optional = [
            ("DB", self.db),
            ("DB.Sync", self.db_sync),
            ("Mem_Buf_Limit", self.mem_buf_limit),
            ("Parser", self.parser),
            ("Key", self.key),
            ("Tag", self.tag),
            ("Tag_Regex", self.tag_regex),
        ]
        for key, value in optional:
            if value:
                kvs.insert(key, value)
        if self.multiline is not None:
            kvs.insert("Multiline", self.multiline)
        if self.multiline_flush_seconds is not None:
            kvs.insert("Multiline_Flush", self.multiline_flush_seconds)
        if self.parser_firstline:
            kvs.insert("Parser_Firstline", self.parser_firstline)
        for index, parser in enumerate(self.parser_n or (), start=1):
            kvs.insert(f"Parser_{index}", parser)
        if self.docker_mode is not None:
            kvs.insert("Docker_Mode", self.docker_mode)
        if self.docker_mode_flush_seconds is not None:
            kvs.insert("Docker_Mode_Flush", self.docker_mode_flush_seconds)
        if self.docker_mode_parser:
            kvs.insert("Docker_Mode_Parser", self.docker_mode_parser)
        if self.disable_inotify_watcher is not None:
            kvs.insert("Inotify_Watcher", not self.disable_inotify_watcher)
        if self.multiline_parser:
            kvs.insert("multiline.parser", self.multiline_parser)
        if self.storage_type:
            kvs.insert("storage.type", self.storage_type)
        if self.pause_on_chunks_overlimit:
            kvs.insert("storage.pause_on_chunks_overlimit", self.pause_on_chunks_overlimit)
        return kvs