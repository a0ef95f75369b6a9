"""A small interactive shell with builtins, pipelines and stopped-job control."""

__version__ = "0.1.0"