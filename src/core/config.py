"""
Configuration Management

Centralized configuration management with YAML file support
and environment variable overrides.
"""

import os
from pathlib import Path
from typing import Optional, Dict, Any, List
from dataclasses import dataclass, field
import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Load .env file if it exists
load_dotenv()


@dataclass
class MatchingConfig:
    """Tolerance settings for typed-answer matching."""
    raw_distance_ratio: float = 0.25
    phonetic_distance_ratio: float = 0.3
    min_tolerance: int = 1


@dataclass
class HintConfig:
    """Progressive hint settings."""
    partial_reveal: float = 0.3
    mostly_reveal: float = 0.8
    mask_char: str = "_"


@dataclass
class QuizConfig:
    """Quiz composition settings."""
    scopes: List[float] = field(default_factory=lambda: [0.3, 0.7, 1.0])
    default_scope: float = 0.3
    multiple_choice_share: float = 0.35
    matching_share: float = 0.35
    match_group_size: int = 3
    distractor_count: int = 3
    seed: Optional[int] = None


@dataclass
class ExtractionRateLimitConfig:
    """Per-client throttling of extraction requests."""
    max_requests: int = 3
    window_seconds: float = 60.0


@dataclass
class ExtractionConfig:
    """Vision extraction client settings."""
    base_url: str = "https://openrouter.ai/api/v1"
    model: str = "openai/gpt-4o-mini"
    image_detail: str = "low"
    timeout: int = 60
    max_tokens: int = 2000
    languages: List[str] = field(default_factory=lambda: ["nl", "en", "de", "fr", "es"])
    rate_limit: ExtractionRateLimitConfig = field(default_factory=ExtractionRateLimitConfig)
    headers: Dict[str, str] = field(default_factory=lambda: {
        "referer": "https://vocab-drill.local",
        "title": "vocab-drill Word List Extractor"
    })


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    console_level: str = "WARNING"  # Separate level for console output
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: str = "logs/vocab.log"
    max_size: str = "10MB"
    backup_count: int = 5


@dataclass
class AppConfig:
    """Main application configuration."""
    name: str = "Vocab Drill"
    version: str = "1.0.0"
    environment: str = "production"
    debug: bool = False

    matching: MatchingConfig = field(default_factory=MatchingConfig)
    hints: HintConfig = field(default_factory=HintConfig)
    quiz: QuizConfig = field(default_factory=QuizConfig)
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, config_path: Path) -> "AppConfig":
        """Load configuration from YAML file."""
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read configuration file {config_path}: {e}")

        return cls.from_dict(config_data)

    @classmethod
    def from_dict(cls, config_data: Dict[str, Any]) -> "AppConfig":
        """Build configuration from a plain (YAML-shaped) dictionary."""
        config_data = dict(config_data)

        # Handle nested app configuration structure
        if 'app' in config_data:
            app_config = config_data.pop('app')
            config_data.update(app_config)

        # Apply environment variable overrides
        config_data = cls._apply_env_overrides(config_data)

        try:
            if 'matching' in config_data and isinstance(config_data['matching'], dict):
                config_data['matching'] = MatchingConfig(**config_data['matching'])

            if 'hints' in config_data and isinstance(config_data['hints'], dict):
                config_data['hints'] = HintConfig(**config_data['hints'])

            if 'quiz' in config_data and isinstance(config_data['quiz'], dict):
                config_data['quiz'] = QuizConfig(**config_data['quiz'])

            if 'extraction' in config_data and isinstance(config_data['extraction'], dict):
                extraction_data = config_data['extraction']
                if 'rate_limit' in extraction_data and isinstance(extraction_data['rate_limit'], dict):
                    extraction_data['rate_limit'] = ExtractionRateLimitConfig(**extraction_data['rate_limit'])
                config_data['extraction'] = ExtractionConfig(**extraction_data)

            if 'logging' in config_data and isinstance(config_data['logging'], dict):
                config_data['logging'] = LoggingConfig(**config_data['logging'])

            if isinstance(config_data.get('debug'), str):
                config_data['debug'] = config_data['debug'].lower() in ('1', 'true', 'yes', 'on')

            return cls(**config_data)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")

    @staticmethod
    def _apply_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        env_mappings = {
            'LOG_LEVEL': ['logging', 'level'],
            'OPENROUTER_BASE_URL': ['extraction', 'base_url'],
            'EXTRACTION_MODEL': ['extraction', 'model'],
            'DEBUG': ['debug'],
            'ENVIRONMENT': ['environment'],
        }

        for env_var, config_path in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value:
                current = config_data
                for key in config_path[:-1]:
                    current = current.setdefault(key, {})
                current[config_path[-1]] = env_value

        return config_data


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config(config_path: Optional[Path] = None) -> AppConfig:
    """Get the application configuration instance."""
    global _config

    if _config is None:
        if config_path is None:
            # Default configuration path
            config_path = Path("config/default.yaml")

        if config_path.exists():
            _config = AppConfig.from_yaml(config_path)
        else:
            # Use default configuration if file doesn't exist
            _config = AppConfig()

    return _config


def set_config(config: Optional[AppConfig]) -> None:
    """Set the global configuration instance (useful for testing)."""
    global _config
    _config = config


def reload_config(config_path: Optional[Path] = None) -> AppConfig:
    """Reload configuration from file."""
    global _config
    _config = None
    return get_config(config_path)
