"""
Pytest Configuration

Global test configuration, fixtures, and utilities for the
vocab-drill test suite.
"""

import json
import logging
import logging.handlers
import tempfile
from pathlib import Path

import pytest
import yaml

# Add src to Python path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import AppConfig, LoggingConfig, set_config
from quiz.models import WordList


@pytest.fixture(autouse=True)
def reset_global_state():
    """Keep the global config and root logger handlers from leaking between tests."""
    root_logger = logging.getLogger()
    level = root_logger.level

    yield

    set_config(None)
    # Only the handlers setup_logging installs; pytest manages its own
    for handler in list(root_logger.handlers):
        if type(handler) in (logging.StreamHandler, logging.handlers.RotatingFileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def test_config(temp_dir):
    """Provide test configuration."""
    return AppConfig(
        name="Test Vocab Drill",
        version="test",
        debug=True,
        logging=LoggingConfig(
            level="DEBUG",
            console_level="CRITICAL",
            file=str(temp_dir / "test.log")
        ),
    )


@pytest.fixture
def config_file(temp_dir):
    """Write a YAML configuration file that logs into the temp directory."""
    path = temp_dir / "config.yaml"
    path.write_text(yaml.safe_dump({
        'app': {'name': 'CLI Test Vocab Drill', 'version': 'cli-test'},
        'logging': {
            'level': 'DEBUG',
            'console_level': 'CRITICAL',
            'file': str(temp_dir / "cli_test.log"),
        },
    }), encoding='utf-8')
    return path


@pytest.fixture
def sample_payload():
    """Provide a Dutch -> German word list in the extraction wire format."""
    return {
        "languages": {"a": "nl", "b": "de"},
        "items": [
            {"a": "hond", "b": ["Hund"]},
            {"a": "vogel", "b": ["Vogel"]},
            {"a": "vader", "b": ["Vater", "Papa"]},
            {"a": "kat", "b": ["Katze"]},
        ],
    }


@pytest.fixture
def word_list(sample_payload):
    """Provide the sample payload as a validated WordList."""
    return WordList.from_payload(sample_payload)


@pytest.fixture
def large_word_list():
    """Provide a ten-pair word list."""
    return WordList.from_payload({
        "languages": {"a": "nl", "b": "en"},
        "items": [{"a": f"woord{i}", "b": [f"word{i}"]} for i in range(10)],
    })


@pytest.fixture
def word_list_file(temp_dir, sample_payload):
    """Write the sample payload to a JSON file."""
    path = temp_dir / "words.json"
    path.write_text(json.dumps(sample_payload), encoding='utf-8')
    return path
