"""
Configuration handling for nbapath.
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional

import yaml

from nbapath.errors import ConfigError
from nbapath.heuristics import DISTANCES, HEURISTICS
from nbapath.nba import TERMINATION_RULES

ALGORITHMS = ("nba", "astar", "dijkstra")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class SearchOptions:
    """Search settings."""
    algorithm: str = "nba"
    oriented: bool = False
    heuristic: str = "zero"
    distance: str = "weight"
    termination: str = "either"
    max_expansions: Optional[int] = None


@dataclass
class GraphSource:
    """Where the routing graph comes from."""
    db_path: str = ""
    edges_table: str = "edges"
    source_column: str = "source"
    target_column: str = "target"
    weight_column: Optional[str] = "cost"
    nodes_table: Optional[str] = None
    node_id_column: str = "id"


@dataclass
class LoggingConfig:
    level: str = "INFO"
    log_dir: Optional[str] = "logs"


@dataclass
class Config:
    """Configuration for routing queries."""

    name: str = "default"
    graph: GraphSource = field(default_factory=GraphSource)
    search: SearchOptions = field(default_factory=SearchOptions)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Build a Config from a plain dict, ignoring unknown keys."""
        cfg = cls(name=data.get('name', 'default'))

        for section in ('graph', 'search', 'logging'):
            target = getattr(cfg, section)
            for k, v in (data.get(section) or {}).items():
                if hasattr(target, k):
                    setattr(target, k, v)

        return cfg

    @classmethod
    def from_yaml(cls, path: str, base: Optional[str] = None) -> "Config":
        """
        Load configuration from a YAML file.

        Args:
            path: Profile YAML file
            base: Optional YAML file the profile is merged over
        """
        if not Path(path).exists():
            raise ConfigError(f"Config file not found: {path}")

        data = load_yaml(Path(path))
        if base:
            data = deep_merge(load_yaml(Path(base)), data)
        return cls.from_dict(data)

    @classmethod
    def from_args(
        cls,
        db_path: str = "",
        name: str = "cli",
        **search_kwargs
    ) -> "Config":
        """Create configuration from CLI arguments; None values keep defaults."""
        known = {f.name for f in fields(SearchOptions)}
        search = SearchOptions(**{k: v for k, v in search_kwargs.items() if v is not None and k in known})
        return cls(name=name, graph=GraphSource(db_path=db_path), search=search)

    def validate(self) -> None:
        """Validate configuration."""
        search = self.search
        if search.algorithm not in ALGORITHMS:
            raise ConfigError(f"Unknown algorithm '{search.algorithm}' (choose from {', '.join(ALGORITHMS)})")
        if search.heuristic not in HEURISTICS:
            raise ConfigError(f"Unknown heuristic '{search.heuristic}'")
        if search.distance not in DISTANCES:
            raise ConfigError(f"Unknown distance '{search.distance}'")
        if search.termination not in TERMINATION_RULES:
            raise ConfigError(f"Unknown termination rule '{search.termination}'")
        if search.max_expansions is not None and search.max_expansions < 0:
            raise ConfigError("max_expansions must be >= 0")

        if self.logging.level.upper() not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level '{self.logging.level}'")

        if self.graph.db_path and not Path(self.graph.db_path).exists():
            raise ConfigError(f"Database not found: {self.graph.db_path}")


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml(path: Path) -> dict:
    """Load a YAML file; missing files load as an empty dict."""
    if not path.exists():
        return {}
    with open(path, 'r') as f:
        return yaml.safe_load(f) or {}
