"""
Load a routing graph from DuckDB tables.
"""

import logging
import time
from typing import Optional

import duckdb

from nbapath.graph.memory import Graph

logger = logging.getLogger(__name__)


def load_graph(
    db_path: str,
    edges_table: str = "edges",
    source_column: str = "source",
    target_column: str = "target",
    weight_column: Optional[str] = "cost",
    nodes_table: Optional[str] = None,
    node_id_column: str = "id",
    con: Optional[duckdb.DuckDBPyConnection] = None,
) -> Graph:
    """
    Build an in-memory Graph from an edge table.

    Args:
        db_path: DuckDB database file (ignored when ``con`` is given)
        edges_table: Table holding one row per directed edge
        source_column: Column with the edge's source node id
        target_column: Column with the edge's target node id
        weight_column: Column with the edge cost, or None for unit weights
        nodes_table: Optional table whose rows become node data
        node_id_column: Id column of ``nodes_table``
        con: Existing connection to read from

    Returns:
        Graph with one link per edge row
    """
    start = time.time()
    own_connection = con is None
    if own_connection:
        con = duckdb.connect(str(db_path), read_only=True)

    try:
        graph = Graph()

        if nodes_table:
            cursor = con.execute(f"SELECT * FROM {nodes_table}")
            columns = [desc[0] for desc in cursor.description]
            for row in cursor.fetchall():
                data = dict(zip(columns, row))
                graph.add_node(data[node_id_column], data)

        weight_expr = weight_column if weight_column else "1.0"
        edges = con.execute(f"""
            SELECT {source_column}, {target_column}, {weight_expr}
            FROM {edges_table}
        """).fetchall()

        for source, target, cost in edges:
            graph.add_link(source, target, cost if cost is not None else 1.0)
    finally:
        if own_connection:
            con.close()

    logger.info(f"Loaded {graph.node_count:,} nodes and {graph.link_count:,} links in {time.time() - start:.2f}s")
    return graph
