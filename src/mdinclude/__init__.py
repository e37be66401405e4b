"""
mdinclude - @include resolution for instruction documents

Merges `@include <path>` directives (absolute, home-relative, or relative to
the including file) into a single document, reporting every problem found
across the inclusion tree instead of stopping at the first one.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
