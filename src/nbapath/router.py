import logging
from typing import Any, Dict, Hashable, Optional

from nbapath.astar import astar
from nbapath.config import Config
from nbapath.errors import ConfigError, NodeNotFoundError
from nbapath.graph import GraphAdapter, load_graph
from nbapath.heuristics import get_distance, get_heuristic, zero
from nbapath.nba import NBA, SearchResult

logger = logging.getLogger(__name__)


class Router:
    def __init__(self, graph: Optional[GraphAdapter] = None, db_path: Optional[str] = None, config: Optional[Config] = None):
        self.config = config or Config()
        self.config.validate()

        if graph is None:
            source = self.config.graph
            db_path = db_path or source.db_path
            if not db_path:
                raise ConfigError("Router needs either a graph or a db_path")
            graph = load_graph(
                db_path,
                edges_table=source.edges_table,
                source_column=source.source_column,
                target_column=source.target_column,
                weight_column=source.weight_column,
                nodes_table=source.nodes_table,
                node_id_column=source.node_id_column,
            )
        self.graph = graph

        opts = self.config.search
        self.heuristic = get_heuristic(opts.heuristic)
        self.distance = get_distance(opts.distance)
        self.finder = NBA(
            graph,
            heuristic=self.heuristic,
            distance=self.distance,
            oriented=opts.oriented,
            termination=opts.termination,
            max_expansions=opts.max_expansions,
        )

    def _format_result(self, result: SearchResult, algorithm: str) -> Dict[str, Any]:
        if not result.found:
            return {"success": False, "error": "No path found", "algorithm": algorithm, "expanded": result.expanded}
        return {
            "success": True,
            "algorithm": algorithm,
            "distance": result.cost,
            "path": result.node_ids,
            "expanded": result.expanded,
        }

    def route(self, source: Hashable, target: Hashable, algorithm: Optional[str] = None) -> Dict[str, Any]:
        """
        Compute route between node ids.

        Supported algorithms:
        - 'nba': Bidirectional NBA* (default)
        - 'astar': Unidirectional A* with the configured heuristic
        - 'dijkstra': Unidirectional A* with the zero heuristic
        """
        algorithm = algorithm or self.config.search.algorithm
        oriented = self.config.search.oriented

        try:
            if algorithm == "nba":
                result = self.finder.search(source, target)
            elif algorithm == "astar":
                result = astar(self.graph, source, target, self.heuristic, self.distance, oriented)
            elif algorithm == "dijkstra":
                result = astar(self.graph, source, target, zero, self.distance, oriented)
            else:
                raise ConfigError(f"Unknown algorithm '{algorithm}'")
        except NodeNotFoundError as e:
            logger.warning(f"Route {source!r} -> {target!r} rejected: {e}")
            return {"success": False, "error": str(e), "algorithm": algorithm}

        return self._format_result(result, algorithm)
