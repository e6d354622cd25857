"""Filesystem and disk usage building blocks: size metrics, permissions, icons and rc config."""

__version__ = "3.1.0"