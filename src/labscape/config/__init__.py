"""Configuration - tool settings and scenario description loading"""

from .settings import LabscapeSettings
from .parser import (
    ConfigurationError,
    ScenarioConfigParser,
    create_default_config,
    load_scenario_description,
    parse_modern_config,
)

__all__ = [
    'LabscapeSettings',
    'ConfigurationError',
    'ScenarioConfigParser',
    'create_default_config',
    'load_scenario_description',
    'parse_modern_config'
]
