"""mdinclude core Python library package.

Subpackages: includes (scanner and resolver), config, schemas and utils.
"""

from . import exceptions  # noqa: F401

__all__ = ["exceptions"]
