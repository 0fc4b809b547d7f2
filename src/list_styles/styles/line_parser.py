"""Line-oriented text format for list styles: ``tag.classA.classB|Label``."""

from typing import Dict, Iterable, List, NamedTuple, Optional

from .models import ElementDescriptor, StyleRule
from ..validators.selector_validator import ASCII_WHITESPACE, ListSelectorValidator
from ..utils.errors import ParsingError
from ..utils.logging_config import LoggerMixin, log_parse_result


class ParseResult(NamedTuple):
    """Parsed rules plus the unparseable lines, keyed by 1-based line number."""

    rules: List[StyleRule]
    errors: Dict[int, str]

    @property
    def valid(self) -> bool:
        return not self.errors


class StyleLineParser(LoggerMixin):
    """Converts between the text form shown to administrators and StyleRule records."""

    def __init__(self, validator: Optional[ListSelectorValidator] = None):
        self.validator = validator or ListSelectorValidator()

    def parse(self, text: str) -> ParseResult:
        """
        Parse every line of ``text``, collecting errors instead of stopping at the first.

        Blank lines are skipped. Each remaining line must be a selector and a
        label separated by a single pipe symbol.

        Args:
            text: Multi-line list styles text

        Returns:
            ParseResult with rules in input order and errors in line order

        Raises:
            ParsingError: If ``text`` is not a string
        """
        if not isinstance(text, str):
            raise ParsingError(f"List styles must be text, got {type(text).__name__}")

        rules: List[StyleRule] = []
        errors: Dict[int, str] = {}

        lines = text.split("\n")
        for line_number, line in enumerate(lines, start=1):
            if not line.strip(ASCII_WHITESPACE):
                continue

            rule = self._parse_line(line)
            if rule is None:
                self.logger.debug(f"Unparseable list style on line {line_number}: {line!r}")
                errors[line_number] = line
                continue

            rules.append(rule)

        log_parse_result(len(lines), len(rules), len(errors))
        return ParseResult(rules=rules, errors=errors)

    def _parse_line(self, line: str) -> Optional[StyleRule]:
        parts = line.split("|")
        if len(parts) != 2:
            return None

        selector, label = (part.strip(ASCII_WHITESPACE) for part in parts)
        if not selector or not label:
            return None

        result = self.validator.validate_selector(selector)
        if not result.valid or result.tag is None:
            return None

        normalized = ElementDescriptor(tag=result.tag, classes=result.classes)
        return StyleRule.from_element(normalized, label)

    def serialize(self, rules: Iterable[StyleRule]) -> str:
        """Render rules back into the text form accepted by ``parse``."""
        lines = []
        for rule in rules:
            tag, classes = rule.element.decompose()
            lines.append(f"{tag}.{'.'.join(classes)}|{rule.label}\n")
        return "".join(lines)
