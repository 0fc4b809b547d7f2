"""List style parsing, serialization and editor projections."""

from .models import (
    Decorator,
    ElementDescriptor,
    ListStylesConfig,
    StyleEntry,
    StyleRule,
)
from .line_parser import ParseResult, StyleLineParser
from .projector import ALLOWED_ELEMENTS, StyleProjector
from .plugin import ListStylesPlugin, StyleValidationResult

__all__ = [
    "Decorator",
    "ElementDescriptor",
    "ListStylesConfig",
    "StyleEntry",
    "StyleRule",
    "ParseResult",
    "StyleLineParser",
    "ALLOWED_ELEMENTS",
    "StyleProjector",
    "ListStylesPlugin",
    "StyleValidationResult",
]
