"""Editor-facing views of parsed list styles."""

from typing import FrozenSet, Iterable, List, Optional, Sequence

from .models import Decorator, StyleRule
from ..config import LIST_TAGS
from ..utils.logging_config import LoggerMixin

ALLOWED_ELEMENTS: FrozenSet[str] = frozenset(f"<{tag} class>" for tag in LIST_TAGS)


class StyleProjector(LoggerMixin):
    """Builds the allowed-elements and decorator views from StyleRule records."""

    def __init__(self, decorator_tags: Optional[Iterable[str]] = None):
        self.decorator_tags = tuple(LIST_TAGS if decorator_tags is None else decorator_tags)

    def to_allowed_elements(self, rules: Sequence[StyleRule]) -> FrozenSet[str]:
        """
        Tag/attribute shapes the markup filter must let through.

        Any rule at all unlocks ``<ol class>`` and ``<ul class>``; which class
        values are permitted is not part of this view.
        """
        if not rules:
            return frozenset()
        return ALLOWED_ELEMENTS

    def to_decorators(self, rules: Sequence[StyleRule]) -> List[Decorator]:
        """Decorators for every rule targeting a list tag, in rule order."""
        decorators = []
        for rule in rules:
            tag, classes = rule.element.decompose()

            if tag not in self.decorator_tags:
                self.logger.debug(f"Skipping list style {rule.label!r} for unsupported tag {tag!r}")
                continue

            decorators.append(Decorator(label=rule.label, class_value=" ".join(classes)))

        return decorators
