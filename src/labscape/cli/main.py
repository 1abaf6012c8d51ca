#!/usr/bin/env python3
"""
labscape Command Line Interface
Heavy modules are imported lazily inside the commands.
"""
import sys
import click
from pathlib import Path
from typing import Optional

from labscape import __version__
from labscape.core.unified_logger import get_logger, LoggerFactory


def get_settings_lazy():
    """Lazy import and create settings"""
    from ..config.settings import LabscapeSettings
    return LabscapeSettings()


def parse_config_lazy(config_path: Path):
    """Lazy import configuration parsing"""
    from ..config.parser import parse_modern_config, ConfigurationError
    try:
        return parse_modern_config(config_path)
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)


def get_config(ctx):
    """Get configuration from context with fallback"""
    if ctx.obj is None:
        ctx.obj = {'config': get_settings_lazy()}
    elif 'config' not in ctx.obj:
        ctx.obj['config'] = get_settings_lazy()
    return ctx.obj['config']


def configure_logging(settings, verbose: bool) -> None:
    level = settings.log_level
    if verbose and level in ('WARNING', 'ERROR', 'CRITICAL'):
        level = 'INFO'
    LoggerFactory.configure(level=level, log_format=settings.log_format, log_file=settings.log_file)


@click.group(invoke_without_command=True)
@click.option('--config', '-c', type=click.Path(exists=True), help='Path to configuration file')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
@click.option('--version', is_flag=True, help='Show version information')
@click.pass_context
def cli(ctx, config: Optional[str], verbose: bool, version: bool):
    """labscape - Virtual lab scenario planner and Vagrantfile generator"""

    if version:
        click.echo(f"labscape v{__version__}")
        ctx.exit()

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit()

    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose

    if config:
        settings = parse_config_lazy(Path(config))
    else:
        # Try default locations
        default_configs = [
            Path.cwd() / 'labscape.yml',
            Path.cwd() / 'labscape.yaml'
        ]

        settings = None
        for config_path in default_configs:
            if config_path.exists():
                settings = parse_config_lazy(config_path)
                break

        if settings is None:
            try:
                settings = get_settings_lazy()
            except Exception as e:
                click.echo(f"Configuration error: {e}", err=True)
                sys.exit(1)

    ctx.obj['config'] = settings
    configure_logging(settings, verbose)


@cli.command()
@click.argument('description_file', type=click.Path(exists=True, path_type=Path))
@click.option('--wire', is_flag=True, help='Also wire systems and show leased addresses')
@click.pass_context
def plan(ctx, description_file: Path, wire: bool):
    """Validate a scenario description and show its model

    DESCRIPTION_FILE: TOML or YAML scenario description
    """
    from .commands import PlanCommandHandler

    config = get_config(ctx)
    verbose = ctx.obj['verbose']

    handler = PlanCommandHandler(config, verbose)
    success = handler.execute(description_file=description_file, wire=wire)

    if not success:
        sys.exit(1)


@cli.command()
@click.argument('description_file', type=click.Path(exists=True, path_type=Path))
@click.option('--output', '-o', type=click.Path(path_type=Path), default=None,
              help='Output Vagrantfile path (default from configuration)')
@click.option('--indent-type', type=click.Choice(['spaces', 'tabs'], case_sensitive=False),
              default=None, help='Indentation unit of the generated file')
@click.option('--tab-size', type=click.IntRange(1, 16), default=None,
              help='Spaces per indentation level')
@click.option('--force', '-f', is_flag=True, help='Overwrite an existing output file')
@click.option('--stdout', 'to_stdout', is_flag=True, help='Print the Vagrantfile instead of writing it')
@click.pass_context
def build(ctx, description_file: Path, output: Optional[Path], indent_type: Optional[str],
          tab_size: Optional[int], force: bool, to_stdout: bool):
    """Generate a Vagrantfile from a scenario description

    DESCRIPTION_FILE: TOML or YAML scenario description
    """
    from .commands import BuildCommandHandler

    config = get_config(ctx)
    verbose = ctx.obj['verbose']

    overrides = {}
    if indent_type is not None:
        overrides['indentation_type'] = indent_type.lower()
    if tab_size is not None:
        overrides['tab_size'] = tab_size
    if overrides:
        config = config.model_validate({**config.model_dump(), **overrides})

    handler = BuildCommandHandler(config, verbose)
    success = handler.execute(
        description_file=description_file,
        output_path=output,
        overwrite=force,
        to_stdout=to_stdout
    )

    if not success:
        sys.exit(1)


@cli.command()
@click.pass_context
def config_show(ctx):
    """Show current configuration"""
    from .commands import ConfigCommandHandler

    config = get_config(ctx)
    verbose = ctx.obj['verbose']

    handler = ConfigCommandHandler(config, verbose)
    handler.execute(action='show')


@cli.command()
@click.option('--output', '-o', type=click.Path(path_type=Path), default='labscape.yml',
              help='Output configuration file path')
@click.option('--force', '-f', is_flag=True, help='Overwrite an existing configuration file')
@click.pass_context
def config_init(ctx, output: Path, force: bool):
    """Initialize default configuration file"""
    from .commands import ConfigCommandHandler

    config = get_config(ctx)
    verbose = ctx.obj['verbose']

    handler = ConfigCommandHandler(config, verbose)
    success = handler.execute(action='init', output_path=output, overwrite=force)

    if not success:
        sys.exit(1)


def main(args=None):
    """Main entry point"""
    logger = get_logger(__name__, "cli_main")
    logger.debug(f"CLI main() called with args: {args}")

    try:
        cli(args)
    except KeyboardInterrupt:
        click.echo("\nOperation interrupted by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Exception in main(): {e}")
        click.echo(f"[ERROR] Unexpected error: {e}", err=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
