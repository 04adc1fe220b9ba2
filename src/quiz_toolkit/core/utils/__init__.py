"""
Utils Package

Serialization of the questions.json document.
"""

from .serialization import (
    serialize_items,
    deserialize_items,
    dumps_items,
    save_questions_json,
    load_questions_json,
)

__all__ = [
    "serialize_items",
    "deserialize_items",
    "dumps_items",
    "save_questions_json",
    "load_questions_json",
]
