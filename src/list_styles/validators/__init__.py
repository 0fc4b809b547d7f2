"""Selector validation for list styles."""

from .selector_validator import (
    ListSelectorValidator,
    SelectorValidationResult,
    is_class_character,
)

__all__ = [
    "ListSelectorValidator",
    "SelectorValidationResult",
    "is_class_character",
]
