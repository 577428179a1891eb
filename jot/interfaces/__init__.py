"""Interfaces for jot: reply rendering, the CLI and its helpers."""
