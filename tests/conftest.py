"""Pytest configuration and fixtures for list styles tests."""

import pytest
import tempfile
import os
from pathlib import Path
from typing import Generator

from fastmcp import Client

from list_styles.config import ListStylesSettings, LoggingConfig
from list_styles.validators.selector_validator import ListSelectorValidator
from list_styles.styles.line_parser import StyleLineParser
from list_styles.styles.projector import StyleProjector
from list_styles.styles.plugin import ListStylesPlugin
from list_styles.styles.models import ListStylesConfig, StyleEntry, StyleRule
from list_styles.server import ListStylesServer


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_styles_text() -> str:
    """Sample list styles text, with a blank line between entries."""
    return "ul.btn|Button\nol.steps.large-steps|Large steps\n\nul.checklist|Checklist\n"


@pytest.fixture
def invalid_styles_text() -> str:
    """List styles text where lines 2 and 4 are invalid."""
    return "ul.btn|Button\na.link|Link\nol.steps|Steps\nul.broken\n"


@pytest.fixture
def sample_rules() -> list[StyleRule]:
    """Rules matching ``sample_styles_text``."""
    return [
        StyleRule(tag="ul", classes=("btn",), label="Button"),
        StyleRule(tag="ol", classes=("steps", "large-steps"), label="Large steps"),
        StyleRule(tag="ul", classes=("checklist",), label="Checklist"),
    ]


@pytest.fixture
def sample_config() -> ListStylesConfig:
    """Persisted configuration matching ``sample_styles_text``."""
    return ListStylesConfig(
        styles=[
            StyleEntry(label="Button", element='<ul class="btn">'),
            StyleEntry(label="Large steps", element='<ol class="steps large-steps">'),
            StyleEntry(label="Checklist", element='<ul class="checklist">'),
        ]
    )


@pytest.fixture
def test_config() -> ListStylesSettings:
    """Test settings."""
    return ListStylesSettings(logging=LoggingConfig(level="CRITICAL", format="text"))


@pytest.fixture
def selector_validator() -> ListSelectorValidator:
    """Selector validator instance for testing."""
    return ListSelectorValidator()


@pytest.fixture
def line_parser(selector_validator: ListSelectorValidator) -> StyleLineParser:
    """Line parser instance for testing."""
    return StyleLineParser(selector_validator)


@pytest.fixture
def projector() -> StyleProjector:
    """Projector instance for testing."""
    return StyleProjector()


@pytest.fixture
def plugin(test_config: ListStylesSettings) -> ListStylesPlugin:
    """Plugin instance for testing."""
    return ListStylesPlugin(test_config)


# FastMCP Server fixtures
@pytest.fixture
def mcp_server(test_config: ListStylesSettings) -> ListStylesServer:
    """Create a ListStylesServer instance for testing."""
    return ListStylesServer(test_config)


@pytest.fixture
def mcp_client(mcp_server: ListStylesServer) -> Client:
    """Create a FastMCP Client connected to the test server."""
    return Client(mcp_server.mcp)


@pytest.fixture(autouse=True)
def setup_test_environment():
    """Set up test environment variables."""
    os.environ["LOG_LEVEL"] = "CRITICAL"

    yield

    os.environ.pop("LOG_LEVEL", None)
