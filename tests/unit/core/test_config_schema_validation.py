from __future__ import annotations

import pytest

from mdinclude.core.schemas import SchemaValidationError, load_schema, validate_payload

CONFIG_SCHEMA = "config/config.schema.yaml"


def test_load_schema_appends_extension() -> None:
    assert load_schema("config/config.schema") is load_schema(CONFIG_SCHEMA)


def test_valid_payload() -> None:
    validate_payload({"includes": {"max_depth": 3, "unresolved": "remove"}}, CONFIG_SCHEMA)


@pytest.mark.parametrize(
    "payload,location",
    [
        ({"includes": {"max_depth": 0}}, "includes.max_depth"),
        ({"includes": {"unresolved": "explode"}}, "includes.unresolved"),
        ({"logging": {"level": "LOUD"}}, "logging.level"),
    ],
)
def test_error_names_location(payload, location: str) -> None:
    with pytest.raises(SchemaValidationError, match=location):
        validate_payload(payload, CONFIG_SCHEMA)


def test_missing_schema() -> None:
    with pytest.raises(FileNotFoundError):
        load_schema("config/nope")
