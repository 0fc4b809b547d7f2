"""List styles - CSS class presets for ordered and unordered lists in a rich-text editor."""

__version__ = "0.1.0"

from .styles import (
    Decorator,
    ElementDescriptor,
    ListStylesConfig,
    ListStylesPlugin,
    StyleEntry,
    StyleLineParser,
    StyleProjector,
    StyleRule,
)

__all__ = [
    "Decorator",
    "ElementDescriptor",
    "ListStylesConfig",
    "ListStylesPlugin",
    "StyleEntry",
    "StyleLineParser",
    "StyleProjector",
    "StyleRule",
    "__version__",
]
