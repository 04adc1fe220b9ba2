"""
Serialization Utilities

Reads and writes questions.json, the single output document handed to the
viewer.

- `serialize_items` / `deserialize_items` convert between QuizItem and the
  JSON record shape
- `save_questions_json` validates, then writes atomically (temp file +
  replace) so a failed run never leaves a half-written document
- Output is deterministic: same items in, same bytes out
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from ..models.items import QuizItem
from ..schemas.validator import validate_items, ValidationError

logger = logging.getLogger(__name__)

JSON_INDENT = 2


# ─────────────────────────────────────────────────────────────────────────────
# Item Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_items(items: Iterable[QuizItem]) -> list[dict[str, Any]]:
    """
    Serialize quiz items to JSON-ready dictionaries.

    Args:
        items: QuizItem instances in output order

    Returns:
        List of dictionaries in the same order
    """
    return [item.to_dict() for item in items]


def deserialize_items(
    data: list[dict[str, Any]],
    *,
    validate: bool = True,
) -> list[QuizItem]:
    """
    Deserialize quiz items from parsed JSON.

    Args:
        data: List of item dictionaries
        validate: Whether to run validate_items first

    Returns:
        List of QuizItem instances

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_items(data, strict=False)

    items = []
    for i, record in enumerate(data):
        try:
            items.append(QuizItem.from_dict(record))
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationError(f"Error parsing item {i}: {e}", path=f"[{i}]") from e
    return items


def _render(data: list[dict[str, Any]]) -> str:
    return json.dumps(data, indent=JSON_INDENT, ensure_ascii=False)


def dumps_items(items: Iterable[QuizItem]) -> str:
    """Render items as the exact text written to questions.json."""
    return _render(serialize_items(items))


# ─────────────────────────────────────────────────────────────────────────────
# File Utilities
# ─────────────────────────────────────────────────────────────────────────────

def save_questions_json(
    items: list[QuizItem],
    path: Path,
    *,
    strict: bool = False,
) -> None:
    """
    Validate and write quiz items to a JSON file.

    Args:
        items: QuizItem instances, already sorted by id
        path: Output path for questions.json
        strict: Also validate against the JSON schema

    Raises:
        ValidationError: If the items break an output invariant
    """
    data = serialize_items(items)
    validate_items(data, strict=strict)

    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            f.write(_render(data))
        tmp_path.replace(path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()

    logger.debug(f"Saved {len(data)} items to {path}")


def load_questions_json(path: Path, *, validate: bool = True) -> list[QuizItem]:
    """
    Load quiz items from a questions.json file.

    Args:
        path: Path to questions.json
        validate: Whether to validate before deserializing

    Returns:
        List of QuizItem instances

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If the document is malformed
    """
    if not path.exists():
        raise FileNotFoundError(f"Questions file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid JSON: {e}", path=str(path)) from e

    return deserialize_items(data, validate=validate)
