"""Fluent Bit input, filter and custom plugins, shared parameter types and config map loading."""