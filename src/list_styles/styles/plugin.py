"""List styles editor plugin: configuration form handling and editor config."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .line_parser import StyleLineParser
from .models import ListStylesConfig, StyleEntry, StyleRule
from .projector import StyleProjector
from ..config import ListStylesSettings
from ..validators.selector_validator import ListSelectorValidator
from ..utils.errors import StyleConfigurationError, format_unparseable_lines
from ..utils.logging_config import LoggerMixin


@dataclass
class StyleValidationResult:
    """Result of validating the submitted list styles text."""

    valid: bool
    styles: List[StyleEntry]
    unparseable_lines: Dict[int, str] = field(default_factory=dict)
    message: Optional[str] = None


class ListStylesPlugin(LoggerMixin):
    """Ties the line parser and projector to a ListStylesConfig value."""

    def __init__(self, settings: Optional[ListStylesSettings] = None):
        self.settings = settings or ListStylesSettings()
        self.parser = StyleLineParser(
            ListSelectorValidator(self.settings.parser.supported_tags)
        )
        self.projector = StyleProjector(self.settings.projector.decorator_tags)

    @staticmethod
    def default_config() -> ListStylesConfig:
        return ListStylesConfig(styles=[])

    @staticmethod
    def rules(config: ListStylesConfig) -> List[StyleRule]:
        return [StyleRule.from_entry(entry) for entry in config.styles]

    def elements_subset(self, config: ListStylesConfig) -> List[str]:
        """Allowed-elements view as a sorted list of element strings."""
        return sorted(self.projector.to_allowed_elements(self.rules(config)))

    def form_value(self, config: ListStylesConfig) -> str:
        """Text to pre-populate the styles field with."""
        return self.parser.serialize(self.rules(config))

    def validate(self, text: str) -> StyleValidationResult:
        """
        Parse submitted text into persisted entries, reporting unparseable lines.

        Args:
            text: The submitted multi-line styles text

        Returns:
            StyleValidationResult; ``message`` is set only when some line failed
        """
        rules, errors = self.parser.parse(text)
        styles = [rule.to_entry() for rule in rules]

        if errors:
            self.logger.info(
                f"Rejected {len(errors)} list style line(s): {', '.join(map(str, errors))}"
            )
            return StyleValidationResult(
                valid=False,
                styles=styles,
                unparseable_lines=errors,
                message=format_unparseable_lines(errors),
            )

        return StyleValidationResult(valid=True, styles=styles)

    def submit(self, text: str) -> ListStylesConfig:
        """
        Build the new configuration value, refusing it if any line is unparseable.

        Raises:
            StyleConfigurationError: With every offending line number
        """
        result = self.validate(text)
        if not result.valid:
            raise StyleConfigurationError(result.unparseable_lines)
        return ListStylesConfig(styles=result.styles)

    def apply(self, config: ListStylesConfig) -> Dict[str, Any]:
        """Dynamic editor plugin configuration carrying the list style decorators."""
        decorators = self.projector.to_decorators(self.rules(config))
        if not decorators:
            return {}

        return {
            self.settings.projector.editor_key: {
                "decorators": [decorator.to_dict() for decorator in decorators]
            }
        }
