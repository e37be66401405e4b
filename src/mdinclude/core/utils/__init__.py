"""Shared helpers for mdinclude (I/O, merging, paths)."""
