"""
Build Command Handler
Runs the full pipeline and writes the generated Vagrantfile
"""

from pathlib import Path
from typing import Optional

import click

from .base_command import BaseCommandHandler
from labscape.cli.presentation import MessageFormatter


class BuildCommandHandler(BaseCommandHandler):
    """Build command handler - parse, wire, render and write"""

    def execute(self, description_file: Path, output_path: Optional[Path] = None,
                overwrite: bool = False, to_stdout: bool = False) -> bool:
        try:
            if not self.validate_file_exists(description_file):
                return False

            if output_path is None:
                output_path = self.config.output_file

            if not to_stdout and output_path.exists() and not overwrite:
                self.error_display.display_error(
                    f"Output file {output_path} already exists. Use --force to overwrite."
                )
                return False

            self.log_verbose(f"Building scenario from {description_file}")
            self.log_verbose(f"Indentation: {self.config.indentation_type.value}, "
                             f"tab size {self.config.tab_size}")

            service = self.create_service()

            if to_stdout:
                result = service.build(description_file)
                # Raw text; rich would wrap long lines
                click.echo(result.content)
                return True

            result = service.build(description_file, output_path, overwrite=overwrite)
            self.console.print(MessageFormatter.success(
                f"Vagrantfile for scenario {result.scenario.name} written to {result.output_path}"
            ))
            return True

        except Exception as e:
            self.handle_error(e, "build")
            return False
