"""Scan result types, duplicate detection, OS filtering, registry YAML and file helpers for game save backups."""

__version__ = "0.1.0"