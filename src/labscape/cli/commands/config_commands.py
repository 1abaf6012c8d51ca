"""
Configuration command handlers
Handles config-show and config-init
"""

from pathlib import Path

from .base_command import BaseCommandHandler
from labscape.cli.presentation import ConfigFormatter, MessageFormatter


class ConfigCommandHandler(BaseCommandHandler):
    """Configuration command handler"""

    def show_config(self) -> bool:
        """Show current configuration"""
        try:
            config_items = ConfigFormatter.format_config_overview(self.config)

            for item in config_items:
                self.console.print(item)

            return True

        except Exception as e:
            self.handle_error(e, "show_config")
            return False

    def init_config(self, output_path: Path, overwrite: bool = False) -> bool:
        """Initialize default configuration file"""
        try:
            if output_path.exists() and not overwrite:
                self.error_display.display_error(
                    f"Configuration file {output_path} already exists. Use --force to overwrite."
                )
                return False

            from labscape.config.parser import create_default_config

            create_default_config(output_path)

            self.console.print(MessageFormatter.success(
                f"Default configuration file created: {output_path}"
            ))
            return True

        except Exception as e:
            self.handle_error(e, "init_config")
            return False

    def execute(self, **kwargs) -> bool:
        """Execute config command based on action"""
        action = kwargs.get('action', 'show')

        if action == 'show':
            return self.show_config()
        elif action == 'init':
            output_path = kwargs.get('output_path', Path('config.yml'))
            overwrite = kwargs.get('overwrite', False)
            return self.init_config(output_path, overwrite)
        else:
            self.error_display.display_error(f"Unknown config action: {action}")
            return False
