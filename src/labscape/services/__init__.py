"""Service layer"""

from .scenario_service import BuildResult, ScenarioService

__all__ = ['BuildResult', 'ScenarioService']
