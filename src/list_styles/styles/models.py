"""Data model for list style presets."""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, Field, field_validator

from ..utils.errors import ParsingError, ValidationError
from ..validators.selector_validator import ASCII_WHITESPACE

_CLASS_PREFIX = 'class="'


@dataclass(frozen=True)
class ElementDescriptor:
    """Canonical tag plus ordered class list, e.g. ``<ul class="btn large">``."""

    tag: str
    classes: Tuple[str, ...]

    @classmethod
    def from_string(cls, element: str) -> "ElementDescriptor":
        """
        Parse a descriptor string produced by ``to_string``.

        Args:
            element: Descriptor string such as ``<ol class="a b">``

        Returns:
            The parsed ElementDescriptor

        Raises:
            ParsingError: If the string is not a tag with a non-empty class attribute
        """
        text = element.strip(ASCII_WHITESPACE)
        if not (text.startswith("<") and text.endswith(">")):
            raise ParsingError(f"Not an element descriptor: {element!r}")

        tag, _, attributes = text[1:-1].strip(ASCII_WHITESPACE).partition(" ")
        attributes = attributes.strip(ASCII_WHITESPACE)
        if (
            not tag
            or not (tag.isascii() and tag.isalnum())
            or not attributes.startswith(_CLASS_PREFIX)
            or not attributes.endswith('"')
        ):
            raise ParsingError(f"Not an element descriptor: {element!r}")

        # Class values are separated by ASCII spaces only
        value = attributes[len(_CLASS_PREFIX) : -1]
        classes = tuple(name for name in value.split(" ") if name)
        if not classes:
            raise ParsingError(f"Element descriptor has no classes: {element!r}")

        return cls(tag=tag, classes=classes)

    def decompose(self) -> Tuple[str, Tuple[str, ...]]:
        """Return ``(tag, classes)``."""
        return self.tag, self.classes

    def to_string(self) -> str:
        return f'<{self.tag} class="{" ".join(self.classes)}">'

    def __str__(self) -> str:
        return self.to_string()


class StyleEntry(BaseModel):
    """Persisted form of one list style: a label and its element descriptor."""

    label: str
    element: str

    @field_validator("element")
    @classmethod
    def _element_is_descriptor(cls, value: str) -> str:
        try:
            ElementDescriptor.from_string(value)
        except ParsingError as e:
            raise ValueError(e.message)
        return value


class ListStylesConfig(BaseModel):
    """The configuration value owned by the host: every defined list style."""

    styles: List[StyleEntry] = Field(default_factory=list)


@dataclass(frozen=True)
class StyleRule:
    """One tag + classes + label list style."""

    tag: str
    classes: Tuple[str, ...]
    label: str

    def __post_init__(self) -> None:
        if not self.classes or not all(self.classes):
            raise ValidationError(
                f"List style {self.label!r} needs at least one non-empty class",
                selector=self.tag,
            )

    @classmethod
    def from_element(cls, element: ElementDescriptor, label: str) -> "StyleRule":
        tag, classes = element.decompose()
        return cls(tag=tag, classes=classes, label=label)

    @classmethod
    def from_entry(cls, entry: StyleEntry) -> "StyleRule":
        return cls.from_element(ElementDescriptor.from_string(entry.element), entry.label)

    @property
    def element(self) -> ElementDescriptor:
        return ElementDescriptor(tag=self.tag, classes=self.classes)

    def to_entry(self) -> StyleEntry:
        return StyleEntry(label=self.label, element=self.element.to_string())


@dataclass(frozen=True)
class Decorator:
    """A clickable list style option offered by the editor."""

    label: str
    class_value: str
    mode: str = "manual"

    def to_dict(self) -> Dict[str, Any]:
        """Render in the shape the editor's decorator configuration expects."""
        return {
            "mode": self.mode,
            "label": self.label,
            "attributes": {"class": self.class_value},
        }
