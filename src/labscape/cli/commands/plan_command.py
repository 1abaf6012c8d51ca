"""
Plan Command Handler
Parses and validates a scenario description and shows the resulting model
"""

from pathlib import Path

from .base_command import BaseCommandHandler
from labscape.cli.presentation import MessageFormatter, ScenarioDisplayManager


class PlanCommandHandler(BaseCommandHandler):
    """Plan command handler - inspect a scenario without writing anything"""

    def execute(self, description_file: Path, wire: bool = False) -> bool:
        try:
            if not self.validate_file_exists(description_file):
                return False

            self.log_verbose(f"Planning scenario from {description_file}")

            service = self.create_service()
            scenario = service.plan(description_file, wire=wire)

            ScenarioDisplayManager().display_scenario(scenario, show_leases=wire)

            if wire:
                self.console.print(MessageFormatter.success(
                    f"Scenario {scenario.name} is valid and all systems were wired"
                ))
            else:
                self.console.print(MessageFormatter.success(f"Scenario {scenario.name} is valid"))
            return True

        except Exception as e:
            self.handle_error(e, "plan")
            return False
