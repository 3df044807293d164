"""Expsum - experiment summary generator for Obsidian vaults."""

__version__ = "0.1.0"
