"""Minimal to-do list application backed by a bundled SQLite template."""

__version__ = "0.1.0"
