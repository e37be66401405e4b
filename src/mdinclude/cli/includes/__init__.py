"""Scan, resolve and check @include directives in documents."""
