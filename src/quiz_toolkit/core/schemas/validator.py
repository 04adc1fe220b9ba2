"""
Schema Validation Utilities

Validates the questions.json document before it is written and after it
is read back.

Basic checks (always run) cover the invariants the viewer relies on:
- ids are positive, unique and ascending
- every correct index points into options
- type is "single" or "multi"

Strict mode additionally validates against quiz_items.schema.json using
jsonschema.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

QUIZ_ITEMS_SCHEMA = "quiz_items"

# Load schemas lazily
_SCHEMAS: dict[str, Any] = {}


def _load_schema(name: str) -> Any:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_item(data: dict[str, Any], *, path: str = "") -> None:
    """
    Validate a single quiz item record.

    Args:
        data: Item dictionary (questions.json shape)
        path: Location prefix used in error messages

    Raises:
        ValidationError: If the record is invalid
    """
    required = ["id", "question", "type"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing]
        )

    item_id = data["id"]
    if not isinstance(item_id, int) or isinstance(item_id, bool) or item_id <= 0:
        raise ValidationError(
            f"Invalid id: {item_id!r} (must be a positive integer)",
            path=f"{path}.id"
        )

    if not isinstance(data["question"], str):
        raise ValidationError(
            f"Q{item_id}: question must be a string",
            path=f"{path}.question"
        )

    if data["type"] not in ("single", "multi"):
        raise ValidationError(
            f"Q{item_id}: invalid type {data['type']!r}",
            path=f"{path}.type"
        )

    options = data.get("options")
    if options is not None and not isinstance(options, list):
        raise ValidationError(
            f"Q{item_id}: options must be a list",
            path=f"{path}.options"
        )

    correct = data.get("correct")
    if correct is not None:
        if options is None:
            raise ValidationError(
                f"Q{item_id}: correct present without options",
                path=f"{path}.correct"
            )
        bad = [i for i in correct if not isinstance(i, int) or not 0 <= i < len(options)]
        if bad:
            raise ValidationError(
                f"Q{item_id}: correct indexes {bad} out of range for {len(options)} options",
                path=f"{path}.correct"
            )


def validate_items(data: list[dict[str, Any]], *, strict: bool = False) -> None:
    """
    Validate a whole questions.json document.

    Args:
        data: List of item dictionaries
        strict: If True, also validate against the JSON schema

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, list):
        raise ValidationError("questions document must be a JSON array")

    previous_id = 0
    for i, item in enumerate(data):
        path = f"[{i}]"
        if not isinstance(item, dict):
            raise ValidationError("item must be an object", path=path)
        validate_item(item, path=path)

        item_id = item["id"]
        if item_id == previous_id:
            raise ValidationError(f"Duplicate id: {item_id}", path=f"{path}.id")
        if item_id < previous_id:
            raise ValidationError(
                f"Items not sorted by id: {item_id} after {previous_id}",
                path=f"{path}.id"
            )
        previous_id = item_id

    if strict:
        schema = _load_schema(QUIZ_ITEMS_SCHEMA)
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message]
            ) from e
