"""Validator for the ``tag.class1.class2`` selectors used by list styles."""

from typing import Iterable, Optional, Tuple
from dataclasses import dataclass

from ..config import LIST_TAGS
from ..utils.logging_config import LoggerMixin

# Only these are trimmed; wider Unicode spaces are valid class characters.
ASCII_WHITESPACE = " \t\n\r\x0b\x0c\x00"


@dataclass
class SelectorValidationResult:
    """Result of selector validation."""

    valid: bool
    error: Optional[str]
    tag: Optional[str] = None
    classes: Tuple[str, ...] = ()


def is_class_character(char: str) -> bool:
    """Whether ``char`` may appear in a class name: [a-zA-Z0-9_-] or U+00A0..U+FFFF."""
    if char in "-_":
        return True
    if char.isascii():
        return char.isalnum()
    return 0x00A0 <= ord(char) <= 0xFFFF


class ListSelectorValidator(LoggerMixin):
    """
    Validator for list style selectors.

    Accepts exactly one supported tag followed by one or more ``.class``
    segments. Anything else (ids, attributes, combinators, whitespace) is
    rejected.
    """

    def __init__(self, supported_tags: Optional[Iterable[str]] = None):
        self.supported_tags = tuple(LIST_TAGS if supported_tags is None else supported_tags)

    def validate_selector(self, selector: str) -> SelectorValidationResult:
        """
        Validate a single list style selector.

        Args:
            selector: Selector string, e.g. ``ul.btn.large-button``

        Returns:
            SelectorValidationResult with the tag and classes when valid
        """
        tag, separator, rest = selector.partition(".")

        if tag not in self.supported_tags:
            return SelectorValidationResult(
                valid=False,
                error=f"Unsupported tag {tag!r}, expected one of: {', '.join(self.supported_tags)}",
            )

        if not separator:
            return SelectorValidationResult(
                valid=False, error="Selector must contain at least one class"
            )

        classes = tuple(rest.split("."))
        for class_name in classes:
            if not class_name:
                return SelectorValidationResult(valid=False, error="Empty class name")

            invalid = [char for char in class_name if not is_class_character(char)]
            if invalid:
                return SelectorValidationResult(
                    valid=False,
                    error=f"Invalid character {invalid[0]!r} in class {class_name!r}",
                )

        return SelectorValidationResult(valid=True, error=None, tag=tag, classes=classes)

    def is_valid(self, selector: str) -> bool:
        return self.validate_selector(selector).valid
