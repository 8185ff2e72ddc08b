"""
CLI for nbapath.
"""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Hashable, Optional

import click
from rich.console import Console

from nbapath.config import ALGORITHMS, Config
from nbapath.errors import NBAPathError
from nbapath.graph import GraphAdapter
from nbapath.heuristics import DISTANCES, HEURISTICS
from nbapath.nba import TERMINATION_RULES
from nbapath.router import Router

DEFAULT_CONFIG = Path("config/default.yaml")


def setup_logging(level: str = "INFO", log_dir: Optional[str] = "logs") -> Optional[Path]:
    """Configure logging to the console and, when log_dir is set, a file."""
    handlers = [logging.StreamHandler()]
    log_file = None

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"nbapath_{timestamp}.log"
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='[%(asctime)s] [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S',
        handlers=handlers,
        force=True,
    )

    return log_file


def parse_node_id(graph: GraphAdapter, raw: str) -> Hashable:
    """Map a command-line id onto the graph's id type (str or int)."""
    if graph.get_node(raw) is not None:
        return raw
    try:
        as_int = int(raw)
    except ValueError:
        return raw
    return as_int if graph.get_node(as_int) is not None else raw


@click.command()
@click.option('--config', '-c', type=click.Path(exists=True), help='Path to YAML configuration file')
@click.option('--db', '-d', type=click.Path(exists=True), help='DuckDB database holding the edges table')
@click.option('--from', 'from_id', required=True, help='Source node id')
@click.option('--to', 'to_id', required=True, help='Target node id')
@click.option('--algorithm', '-a', type=click.Choice(ALGORITHMS), help='Search algorithm')
@click.option('--oriented/--undirected', default=None, help='Respect edge direction')
@click.option('--heuristic', type=click.Choice(list(HEURISTICS)), help='Heuristic function')
@click.option('--distance', type=click.Choice(list(DISTANCES)), help='Edge cost function')
@click.option('--termination', type=click.Choice(TERMINATION_RULES), help='NBA* stopping rule')
@click.option('--max-expansions', type=int, help='Abort after this many expanded nodes')
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False), help='Log level')
@click.option('--log-dir', type=click.Path(), help='Directory for log files')
@click.option('--json', 'as_json', is_flag=True, help='Print the result as JSON')
def main(
    config,
    db,
    from_id,
    to_id,
    algorithm,
    oriented,
    heuristic,
    distance,
    termination,
    max_expansions,
    log_level,
    log_dir,
    as_json
):
    """
    nbapath - shortest paths with bidirectional NBA* search.

    Examples:

        # Using config file
        nbapath --config config/default.yaml --from 1 --to 42

        # Using CLI arguments
        nbapath --db network.duckdb --from 1 --to 42 --oriented --termination bound
    """
    overrides = {
        'algorithm': algorithm,
        'oriented': oriented,
        'heuristic': heuristic,
        'distance': distance,
        'termination': termination,
        'max_expansions': max_expansions,
    }
    if config:
        # profiles only carry what differs from the default profile
        base = str(DEFAULT_CONFIG) if DEFAULT_CONFIG.exists() else None
        cfg = Config.from_yaml(config, base=base)
        if db:
            cfg.graph.db_path = db
        for k, v in overrides.items():
            if v is not None:
                setattr(cfg.search, k, v)
    else:
        cfg = Config.from_args(db_path=db or "", **overrides)

    if log_level:
        cfg.logging.level = log_level
    if log_dir:
        cfg.logging.log_dir = log_dir

    if not cfg.graph.db_path:
        click.echo("Error: Either --db or a config with graph.db_path is required", err=True)
        sys.exit(1)

    setup_logging(cfg.logging.level, cfg.logging.log_dir)

    try:
        router = Router(config=cfg)
        source = parse_node_id(router.graph, from_id)
        target = parse_node_id(router.graph, to_id)
        result = router.route(source, target)
    except NBAPathError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if "path" not in result and result.get("error") != "No path found":
        click.echo(f"Error: {result['error']}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result, default=str))
        return

    console = Console()
    if not result["success"]:
        console.print(f"[bold yellow]No path found[/bold yellow] from {source} to {target}")
        console.print(f"  Expanded: {result['expanded']:,}")
        return

    console.print(f"[bold green]✓ Path found[/bold green] ({result['algorithm']})")
    console.print(f"  Distance: {result['distance']:.4f}")
    console.print(f"  Hops: {len(result['path']) - 1}")
    console.print(f"  Expanded: {result['expanded']:,}")
    console.print(f"  Path: {' -> '.join(str(n) for n in result['path'])}")


if __name__ == '__main__':
    main()
