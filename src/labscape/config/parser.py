"""
Configuration Parser Module
Loads tool settings (YAML) and scenario description files (TOML or YAML)
"""
import tomllib
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import ValidationError

from .settings import LabscapeSettings
from ..core.unified_logger import get_logger
from ..domain.entities.scenario import Scenario


logger = get_logger(__name__, "parser")

TOML_SUFFIXES = ('.toml',)
YAML_SUFFIXES = ('.yml', '.yaml')


class ConfigurationError(Exception):
    """Configuration-related errors"""
    pass


def parse_modern_config(config_file: Union[str, Path]) -> LabscapeSettings:
    """
    Parse YAML format configuration file

    Args:
        config_file: Configuration file path

    Returns:
        LabscapeSettings: Parsed configuration object

    Raises:
        ConfigurationError: Configuration file parsing or validation failed
    """
    config_file = Path(config_file)

    if not config_file.exists():
        raise ConfigurationError(f"Configuration file not found: {config_file}")

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        if not isinstance(config_data, dict):
            raise ConfigurationError(f"Configuration file {config_file} must contain a mapping")

        return LabscapeSettings(**config_data)

    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}")
    except yaml.YAMLError as e:
        raise ConfigurationError(f"YAML parsing error: {e}")
    except OSError as e:
        raise ConfigurationError(f"Error reading config file: {e}")


def create_default_config(config_file: Union[str, Path]) -> LabscapeSettings:
    """
    Create default configuration file

    Args:
        config_file: Configuration file path

    Returns:
        LabscapeSettings: Default configuration object
    """
    config_file = Path(config_file)
    settings = LabscapeSettings()

    config_data = {
        'indentation_type': settings.indentation_type.value,
        'tab_size': settings.tab_size,
        'output_file': str(settings.output_file),
        'log_level': settings.log_level,
        'log_format': settings.log_format.value,
    }

    with open(config_file, 'w', encoding='utf-8') as f:
        yaml.dump(config_data, f, default_flow_style=False, indent=2)

    logger.info(f"Created default config file: {config_file}")
    return settings


def load_scenario_description(description_file: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a scenario description into a plain key/value tree.

    TOML and YAML are accepted, chosen by file suffix.

    Raises:
        ConfigurationError: missing file, unknown suffix or parse failure
    """
    description_file = Path(description_file)

    if not description_file.exists():
        raise ConfigurationError(f"Scenario description not found: {description_file}")

    suffix = description_file.suffix.lower()

    try:
        if suffix in TOML_SUFFIXES:
            with open(description_file, 'rb') as f:
                data = tomllib.load(f)
        elif suffix in YAML_SUFFIXES:
            with open(description_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        else:
            supported = ", ".join(TOML_SUFFIXES + YAML_SUFFIXES)
            raise ConfigurationError(
                f"Unsupported scenario description format '{suffix}' (supported: {supported})"
            )
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"TOML parsing error in {description_file}: {e}")
    except yaml.YAMLError as e:
        raise ConfigurationError(f"YAML parsing error in {description_file}: {e}")
    except OSError as e:
        raise ConfigurationError(f"Error reading {description_file}: {e}")

    if not isinstance(data, dict):
        raise ConfigurationError(f"Scenario description {description_file} must contain a mapping at top level")

    logger.debug(f"Loaded scenario description {description_file}")
    return data


class ScenarioConfigParser:
    """
    Scenario Description Parser
    Parses description files into an unwired Scenario aggregate
    """

    def parse_file(self, description_file: Union[str, Path]) -> Scenario:
        """
        Parse scenario description file

        Raises:
            ConfigurationError: the file could not be read or parsed
            LabscapeException: the description is not a valid scenario
        """
        return self.parse_data(load_scenario_description(description_file))

    def parse_data(self, data: Dict[str, Any]) -> Scenario:
        return Scenario.from_config(data)
