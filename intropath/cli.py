"""CLI for intropath."""

import json
import logging
from pathlib import Path

import click

from .pathfinding.config import PathfindingConfig
from .pathfinding.graph import build_contact_graph
from .pathfinding.loader import Network, NetworkFileError, load_network
from .pathfinding.pipeline import find_alternative_paths, find_best_paths
from .pathfinding.renderer import path_to_dict, render_paths
from .pathfinding.types import ConnectionPath

_ENV_CONFIG = PathfindingConfig.from_env()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def _load(network_file: Path) -> Network:
    try:
        return load_network(network_file)
    except NetworkFileError as exc:
        raise SystemExit(str(exc)) from exc


def _emit(paths: list[ConnectionPath], output_format: str, heading: str) -> None:
    if output_format == "json":
        click.echo(json.dumps([path_to_dict(p) for p in paths], indent=2))
    else:
        click.echo(render_paths(paths, heading=heading))


@click.group()
def cli():
    """intropath - find introduction paths through your contact network."""
    pass


@cli.command()
@click.argument(
    "network_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option("--source", "-s", required=True, help="Contact id to start from")
@click.option(
    "--target", "-t", "targets", multiple=True, required=True, help="Target contact id"
)
@click.option(
    "--max-length",
    type=int,
    default=_ENV_CONFIG.max_path_length,
    show_default=True,
    help="Maximum hops per path",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["markdown", "json"]),
    default="markdown",
    help="Output format",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def best(
    network_file: Path,
    source: str,
    targets: tuple[str, ...],
    max_length: int,
    output_format: str,
    verbose: bool,
):
    """Show the best path from SOURCE to each TARGET."""
    _configure_logging(verbose)
    network = _load(network_file)

    paths = find_best_paths(
        source,
        list(targets),
        network.nodes,
        network.edges,
        network.details,
        max_length,
        config=_ENV_CONFIG,
    )
    _emit(paths, output_format, f"Best paths from {source}")


@cli.command()
@click.argument(
    "network_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option("--source", "-s", required=True, help="Contact id to start from")
@click.option("--target", "-t", required=True, help="Target contact id")
@click.option(
    "--max-paths",
    "-n",
    type=int,
    default=_ENV_CONFIG.max_paths,
    show_default=True,
    help="Maximum number of paths",
)
@click.option(
    "--max-length",
    type=int,
    default=_ENV_CONFIG.max_path_length,
    show_default=True,
    help="Maximum hops per path",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["markdown", "json"]),
    default="markdown",
    help="Output format",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def alternatives(
    network_file: Path,
    source: str,
    target: str,
    max_paths: int,
    max_length: int,
    output_format: str,
    verbose: bool,
):
    """Show alternative paths from SOURCE to TARGET."""
    _configure_logging(verbose)
    network = _load(network_file)

    paths = find_alternative_paths(
        source,
        target,
        network.nodes,
        network.edges,
        network.details,
        max_paths,
        max_length,
        config=_ENV_CONFIG,
    )
    _emit(paths, output_format, f"Alternative paths from {source} to {target}")


@cli.command()
@click.argument(
    "network_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
def stats(network_file: Path):
    """Show contact graph statistics."""
    network = _load(network_file)
    graph = build_contact_graph(network.nodes, network.edges)
    click.echo(str(graph.get_stats()))


if __name__ == "__main__":
    cli()
