"""
CLI Presentation Layer
Rich formatting and output display
"""

from .formatters import StatusFormatter, ConfigFormatter, MessageFormatter
from .display import ScenarioDisplayManager, ErrorDisplayManager
from .console import get_console, get_error_console

__all__ = [
    'StatusFormatter',
    'ConfigFormatter',
    'MessageFormatter',
    'ScenarioDisplayManager',
    'ErrorDisplayManager',
    'get_console',
    'get_error_console'
]
