"""
Configuranator CLI — configuranator [generate] | check | defaults
"""
import logging
from pathlib import Path

import click
import toml

from configuranator import __version__
from configuranator.config import ManagerConfig, default_vision_model_config, read_config
from configuranator.config.codec import ConfigEncoder
from configuranator.core.exceptions import ConfiguratorError
from configuranator.core.structured_logger import TraceContext, configure_logging, get_logger
from configuranator.interfaces.terminal import ConfigBuilder

logger = get_logger("CLI")


def _fail(error: ConfiguratorError) -> None:
    """Report a fatal error once and exit non-zero."""
    logger.error("Run failed", error=error.to_dict())
    click.echo(error.user_message(), err=True)
    raise SystemExit(1)


def _summary(path: Path, config: ManagerConfig) -> list[str]:
    coords = config.coordinates
    comm = config.commconfig
    vision = config.sauron_config
    return [
        f"{path}: OK",
        f"  test configuration: {str(config.test).lower()}",
        f"  aircraft: turn radius {config.aircraft_properties.turn_radius} m, "
        f"velocity {config.aircraft_properties.velocity} m/s",
        f"  areas: {len(coords.waypoints)} waypoints, {len(coords.mapping_area)} mapping points, "
        f"{len(coords.target_area)} target points",
        f"  thresholds: flying {coords.flying_threshold}, mapping {coords.mapping_threshold}",
        f"  ports: dad->gnc {comm.dad_gnc_port}, gnc->dad {comm.gnc_dad_port}, "
        f"dad->sauron {comm.dad_sauron_port}, sauron->dad {comm.sauron_dad_port}",
        f"  ground station {comm.groundstation_ip}, flight computer {comm.flightcomputer_ip}",
        f"  model: {vision.model_path} ({vision.dataset_name}, input {vision.input_size})",
    ]


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="configuranator")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Configuranator — build the shared platform configuration file."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    if ctx.invoked_subcommand is None:
        ctx.invoke(generate)


@cli.command()
def generate() -> None:
    """Interactively build a configuration file."""
    with TraceContext() as trace_id:
        logger.info("Interactive build started", run=trace_id)
        try:
            ConfigBuilder().run()
        except ConfiguratorError as e:
            _fail(e)


@cli.command()
@click.argument("path", type=click.Path(path_type=Path))
def check(path: Path) -> None:
    """Load a configuration file and print a summary."""
    try:
        config = read_config(path)
    except ConfiguratorError as e:
        _fail(e)
    for line in _summary(path, config):
        click.echo(line)


@cli.command()
def defaults() -> None:
    """Print the default vision model section as TOML."""
    section = default_vision_model_config().model_dump(mode="json")
    click.echo(toml.dumps({"sauron_config": section}, encoder=ConfigEncoder()), nl=False)


if __name__ == "__main__":
    cli()
