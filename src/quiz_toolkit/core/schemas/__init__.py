"""
Schemas Package

JSON schema definition for questions.json and validation utilities.
"""

from .validator import (
    validate_item,
    validate_items,
    ValidationError,
    QUIZ_ITEMS_SCHEMA,
)

__all__ = [
    "validate_item",
    "validate_items",
    "ValidationError",
    "QUIZ_ITEMS_SCHEMA",
]
