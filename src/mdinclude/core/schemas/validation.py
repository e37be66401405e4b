"""Shared schema validation utilities.

Schemas are JSON Schema documents stored as YAML under
``mdinclude.data/schemas/`` and validated with ``jsonschema``.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from mdinclude.core.utils.io import read_yaml
from mdinclude.data import get_data_path


class SchemaValidationError(ValueError):
    """Raised when schema validation fails."""


@lru_cache(maxsize=16)
def _load_schema_cached(schema_name: str) -> Dict[str, Any]:
    schema_path = get_data_path("schemas") / schema_name
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_name} (searched {schema_path.parent})")
    schema = read_yaml(schema_path, default=None, raise_on_error=True)
    if not isinstance(schema, dict):
        raise ValueError(f"Schema must be a YAML mapping, got {type(schema).__name__}")
    return schema


def load_schema(schema_name: str) -> Dict[str, Any]:
    """Load a bundled schema.

    Automatically appends ``.yaml`` if no extension is present.

    Raises:
        FileNotFoundError: If schema file doesn't exist.
        ValueError: If schema is not a YAML mapping.
    """
    lowered = schema_name.lower()
    if not (lowered.endswith(".yaml") or lowered.endswith(".yml")):
        schema_name = f"{schema_name}.yaml"
    return _load_schema_cached(schema_name)


def validate_payload(payload: Dict[str, Any], schema_name: str) -> None:
    """Validate a payload against a bundled schema.

    Raises:
        SchemaValidationError: If validation fails.
        FileNotFoundError: If schema doesn't exist.
    """
    schema = load_schema(schema_name)
    try:
        jsonschema.validate(instance=payload, schema=schema, cls=Draft202012Validator)
    except jsonschema.ValidationError as exc:
        location = ".".join(str(p) for p in exc.absolute_path) or "<root>"
        raise SchemaValidationError(
            f"Validation failed against schema '{schema_name}' at {location}: {exc.message}"
        ) from exc


__all__ = ["SchemaValidationError", "load_schema", "validate_payload"]
