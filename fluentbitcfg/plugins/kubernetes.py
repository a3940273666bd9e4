"""The kubernetes filter, which enriches records with Kubernetes metadata."""

from __future__ import annotations

from dataclasses import dataclass

from .base import CommonParams, KVs, Plugin, SecretLoader


@dataclass(kw_only=True)
class Kubernetes(CommonParams, Plugin):
    """Enriches log records with Kubernetes metadata."""

    buffer_size: str = ""
    kube_url: str = ""
    kube_ca_file: str = ""
    kube_ca_path: str = ""
    kube_token_file: str = ""
    kube_tag_prefix: str = ""
    merge_log: bool | None = None
    merge_log_key: str = ""
    merge_log_trim: bool | None = None
    merge_parser: str = ""
    keep_log: bool | None = None
    tls_debug: int | None = None
    tls_verify: bool | None = None
    use_journal: bool | None = None
    cache_use_docker_id: bool | None = None
    regex_parser: str = ""
    k8s_logging_parser: bool | None = None
    k8s_logging_exclude: bool | None = None
    labels: bool | None = None
    annotations: bool | None = None
    kube_meta_preload_cache_dir: str = ""
    dummy_meta: bool | None = None
    dns_retries: int | None = None
    dns_wait_time: int | None = None
    use_kubelet: bool | None = None
    kubelet_port: int | None = None
    kubelet_host: str = ""
    kube_meta_cache_ttl: str = ""
    kube_token_ttl: str = ""

    def name(self) -> str:
        return "kubernetes"

    def params(self, sl: SecretLoader) -> KVs:
        kvs = KVs()
        self.add_common_params(kvs)
        # Strings are written when non-empty, optional values when set.
        entries = [
            ("Buffer_Size", self.buffer_size),
            ("Kube_URL", self.kube_url),
            ("Kube_CA_File", self.kube_ca_file),
            ("Kube_CA_Path", self.kube_ca_path),
            ("Kube_Token_File", self.kube_token_file),
            ("Kube_Tag_Prefix", self.kube_tag_prefix),
            ("Merge_Log", self.merge_log),
            ("Merge_Log_Key", self.merge_log_key),
            ("Merge_Log_Trim", self.merge_log_trim),
            ("Merge_Parser", self.merge_parser),
            ("Keep_Log", self.keep_log),
            ("tls.debug", self.tls_debug),
            ("tls.verify", self.tls_verify),
            ("Use_Journal", self.use_journal),
            ("Cache_Use_Docker_Id", self.cache_use_docker_id),
            ("Regex_Parser", self.regex_parser),
            ("K8S-Logging.Parser", self.k8s_logging_parser),
            ("K8S-Logging.Exclude", self.k8s_logging_exclude),
            ("Labels", self.labels),
            ("Annotations", self.annotations),
            ("Kube_meta_preload_cache_dir", self.kube_meta_preload_cache_dir),
            ("Dummy_Meta", self.dummy_meta),
            ("DNS_Retries", self.dns_retries),
            ("DNS_Wait_Time", self.dns_wait_time),
            ("Use_Kubelet", self.use_kubelet),
            ("Kubelet_Port", self.kubelet_port),
            ("Kubelet_Host", self.kubelet_host),
            ("Kube_Meta_Cache_TTL", self.kube_meta_cache_ttl),
            ("Kube_Token_TTL", self.kube_token_ttl),
        ]
        for key, value in entries:
            if value is not None and value != "":
                kvs.insert(key, value)
        return kvs