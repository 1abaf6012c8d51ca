"""
Rich text formatters for CLI output
"""

from typing import Optional
from rich.text import Text
from labscape.config.settings import LabscapeSettings


class StatusFormatter:
    """Status indicator formatter for wiring states"""

    _styles = {
        'unwired': (':white_circle:', 'dim'),
        'wiring': (':yellow_circle:', 'yellow'),
        'wired': (':green_circle:', 'green'),
        'failed': (':red_circle:', 'red'),
        'ok': (':check_mark:', 'green'),
        'fail': (':cross_mark:', 'red'),
    }

    @classmethod
    def format_status(cls, status: str, label: Optional[str] = None) -> Text:
        """Format status with emoji and color"""
        status_lower = status.lower()
        label_text = label or status

        if status_lower in cls._styles:
            emoji, color = cls._styles[status_lower]
            return Text.assemble(
                Text.from_markup(emoji, style=color),
                (" ", ""),
                (label_text, color)
            )
        else:
            return Text.assemble(
                ("•", "dim"),
                (" ", ""),
                (label_text, "dim")
            )


class ConfigFormatter:
    """Configuration display formatter"""

    @staticmethod
    def format_config_item(label: str, value: str, style: str = "cyan") -> Text:
        """Format configuration item"""
        return Text.assemble(
            (f"  {label}: ", "dim"),
            (value, style)
        )

    @staticmethod
    def format_config_overview(config: LabscapeSettings) -> list[Text]:
        """Format complete configuration overview"""
        items = []

        items.append(Text("Current configuration:", style="bold blue"))
        items.append(ConfigFormatter.format_config_item(
            "Indentation type", config.indentation_type.value
        ))
        if config.indentation_type.value == "spaces":
            items.append(ConfigFormatter.format_config_item(
                "Tab size", str(config.tab_size)
            ))
        items.append(ConfigFormatter.format_config_item(
            "Output file", str(config.output_file)
        ))
        items.append(ConfigFormatter.format_config_item(
            "Log level", config.log_level, "yellow"
        ))
        items.append(ConfigFormatter.format_config_item(
            "Log format", config.log_format.value, "yellow"
        ))

        if config.log_file:
            items.append(ConfigFormatter.format_config_item(
                "Log file", str(config.log_file), "yellow"
            ))

        return items


class MessageFormatter:
    """General message formatter"""

    @staticmethod
    def success(message: str) -> Text:
        """Format success message"""
        return Text.assemble(
            ("[OK] ", "bold green"),
            (message, "green")
        )

    @staticmethod
    def error(message: str) -> Text:
        """Format error message"""
        return Text.assemble(
            ("[ERROR] ", "bold red"),
            (message, "red")
        )

    @staticmethod
    def warning(message: str) -> Text:
        """Format warning message"""
        return Text.assemble(
            ("[WARNING] ", "bold yellow"),
            (message, "yellow")
        )

    @staticmethod
    def info(message: str) -> Text:
        """Format info message"""
        return Text.assemble(
            ("[INFO] ", "bold blue"),
            (message, "blue")
        )
