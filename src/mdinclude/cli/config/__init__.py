"""Inspect the effective mdinclude configuration."""
