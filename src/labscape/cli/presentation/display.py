"""
Display managers - rendering of scenario models and errors
"""

from typing import Optional
from rich.table import Table
from rich.text import Text
from rich.markup import escape

from .formatters import StatusFormatter, MessageFormatter
from .console import get_console, get_error_console
from labscape.domain.entities import Scenario


class ScenarioDisplayManager:
    """Scenario display manager - networks, systems and leases as tables"""

    def __init__(self):
        self.console = get_console()

    def display_scenario(self, scenario: Scenario, show_leases: bool = False) -> None:
        self.console.print(Text.assemble(
            ("Scenario ", "bold blue"),
            (scenario.name, "bold"),
            (f" ({len(scenario.networks)} networks, {len(scenario.systems)} systems)", "dim")
        ))
        self.display_networks(scenario)
        self.display_systems(scenario, show_leases)

    def display_networks(self, scenario: Scenario) -> None:
        if not scenario.networks:
            self.console.print(MessageFormatter.info("No networks defined"))
            return

        table = Table(title="Networks", title_justify="left")
        table.add_column("Name", style="bold")
        table.add_column("Type")
        table.add_column("Subnet", style="cyan")
        table.add_column("Usable", justify="right")

        for network in scenario.networks:
            table.add_row(
                escape(network.name),
                network.network_type.value,
                str(network.subnet) if network.subnet else "-",
                str(network.capacity) if network.is_internal else "-"
            )

        self.console.print(table)

    def display_systems(self, scenario: Scenario, show_leases: bool = False) -> None:
        if not scenario.systems:
            self.console.print(MessageFormatter.info("No systems defined"))
            return

        table = Table(title="Systems", title_justify="left")
        table.add_column("Name", style="bold")
        table.add_column("Base box")
        table.add_column("Networks")
        table.add_column("Status")
        if show_leases:
            table.add_column("Addresses", style="cyan", min_width=16)

        for system in scenario.systems:
            row = [
                escape(system.name),
                escape(system.base_box),
                escape(", ".join(system.network_names)) or "-",
                StatusFormatter.format_status(system.status.value),
            ]
            if show_leases:
                row.append(self._format_interfaces(system))
            table.add_row(*row)

        self.console.print(table)

    def _format_interfaces(self, system) -> str:
        parts = []
        for interface in system.interfaces:
            if interface.address is None:
                parts.append(f"{interface.network_name}: public")
            else:
                parts.append(f"{interface.network_name}: {interface.address}")
        return escape("\n".join(parts)) or "-"


class ErrorDisplayManager:
    """Error display manager - unified error output on stderr"""

    def __init__(self):
        self.error_console = get_error_console()

    def display_error(self, message: str, details: Optional[str] = None) -> None:
        self.error_console.print(MessageFormatter.error(message))
        if details:
            self.error_console.print(f"  Details: {escape(details)}")

    def display_command_error(self, command: str, error: Exception) -> None:
        self.error_console.print(MessageFormatter.error(f"Command '{command}' failed"))
        self.error_console.print(f"  Error: {escape(str(error))}")

