"""
Base Command Handler - Provides abstract base class for command handlers
"""

from abc import ABC, abstractmethod
from pathlib import Path

from labscape.config.settings import LabscapeSettings
from labscape.config.parser import ConfigurationError
from labscape.core.exceptions import LabscapeException, describe_error
from labscape.cli.presentation import get_console, get_error_console, ErrorDisplayManager


class BaseCommandHandler(ABC):
    """Command handler base class - common error handling and service access"""

    def __init__(self, config: LabscapeSettings, verbose: bool = False):
        from labscape.core.unified_logger import get_logger
        self.logger = get_logger(__name__, "base_command")

        self.config = config
        self.verbose = verbose

        self.console = get_console()
        self.error_console = get_error_console()
        self.error_display = ErrorDisplayManager()

    @abstractmethod
    def execute(self, **kwargs) -> bool:
        """Execute command - Subclasses must implement"""
        pass

    def handle_error(self, error: Exception, context: str = "") -> None:
        """Unified error handling"""
        self.logger.debug(f"Command failed: {describe_error(error, context or None)}")

        if isinstance(error, (LabscapeException, ConfigurationError)):
            self.error_display.display_error(str(error))
        elif context:
            self.error_display.display_command_error(context, error)
        else:
            self.error_display.display_error(str(error))

        if self.verbose:
            import traceback
            self.error_console.print(traceback.format_exc(), markup=False)

    def validate_file_exists(self, file_path: Path) -> bool:
        """Validate file exists"""
        if not file_path.exists():
            self.logger.debug(f"File does not exist: {file_path}")
            self.error_display.display_error(f"File not found: {file_path}")
            return False
        return True

    def create_service(self):
        """Scenario service bound to the current settings"""
        from labscape.services.scenario_service import ScenarioService
        return ScenarioService(self.config)

    def log_verbose(self, message: str) -> None:
        """Verbose logging output"""
        if self.verbose:
            self.console.print(f"[dim]{message}[/dim]")
