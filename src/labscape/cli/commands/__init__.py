"""
CLI Command Handlers
One handler per CLI command
"""

from .base_command import BaseCommandHandler
from .plan_command import PlanCommandHandler
from .build_command import BuildCommandHandler
from .config_commands import ConfigCommandHandler

__all__ = [
    'BaseCommandHandler',
    'PlanCommandHandler',
    'BuildCommandHandler',
    'ConfigCommandHandler'
]
