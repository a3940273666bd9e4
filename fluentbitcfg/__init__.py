"""Declarative Fluent Bit inputs and outputs rendered into configuration sections."""

__version__ = "0.1.0"