"""
Scenario Service

Coordinates the pipeline the CLI exposes: load a description file, build and
validate the scenario, wire its systems and render the Vagrantfile.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..config.parser import ScenarioConfigParser
from ..config.settings import LabscapeSettings
from ..core.unified_logger import get_logger, ScenarioLoggingContext
from ..domain.entities.scenario import Scenario
from ..output.vagrantfile import VagrantfileEmitter


@dataclass
class BuildResult:
    """Outcome of a build: the wired scenario and its rendered text"""
    scenario: Scenario
    content: str
    output_path: Optional[Path] = None


class ScenarioService:
    """Scenario pipeline: parse, validate, wire, render, write"""

    def __init__(self, settings: Optional[LabscapeSettings] = None):
        self.settings = settings or LabscapeSettings()
        self.parser = ScenarioConfigParser()
        self.logger = get_logger(__name__, "scenario_service")

    def load(self, description_file: Union[str, Path]) -> Scenario:
        """Parse and validate a description file into an unwired scenario"""
        self.logger.info(f"Loading scenario description {description_file}")
        scenario = self.parser.parse_file(description_file)
        scenario.validate()
        return scenario

    def wire(self, scenario: Scenario) -> Scenario:
        with ScenarioLoggingContext(scenario.name, "wiring"):
            scenario.wire_networking()
        return scenario

    def render(self, scenario: Scenario) -> str:
        emitter = VagrantfileEmitter(self.settings.indentation_type, self.settings.tab_size)
        with ScenarioLoggingContext(scenario.name, "render"):
            return emitter.render(scenario)

    def plan(self, description_file: Union[str, Path], wire: bool = False) -> Scenario:
        """Load a scenario and optionally wire it, without rendering"""
        scenario = self.load(description_file)
        if wire:
            self.wire(scenario)
        return scenario

    def build(self, description_file: Union[str, Path],
              output_path: Optional[Union[str, Path]] = None,
              overwrite: bool = False) -> BuildResult:
        """
        Run the whole pipeline.

        When output_path is None nothing is written and the rendered text is
        only returned.

        Raises:
            FileExistsError: output exists and overwrite is False
            LabscapeException: the scenario is invalid or could not be wired
            ConfigurationError: the description file could not be read
        """
        if output_path is not None:
            output_path = Path(output_path)
            if output_path.exists() and not overwrite:
                raise FileExistsError(f"Output file already exists: {output_path}")

        scenario = self.wire(self.load(description_file))
        content = self.render(scenario)

        if output_path is not None:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(content + "\n", encoding='utf-8')
            self.logger.info(f"Wrote Vagrantfile for scenario {scenario.name} to {output_path}")

        return BuildResult(scenario=scenario, content=content, output_path=output_path)
