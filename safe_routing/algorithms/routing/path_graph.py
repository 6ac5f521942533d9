"""
Search graph construction from route geometries.

Each input path is sampled into nodes keyed by their coordinates rounded to six
decimals. Consecutive samples are joined by undirected edges annotated with
their length and the safety of their midpoint. Nodes follow the usual street
network convention of ``y`` (lat) and ``x`` (lng) attributes.
"""

import logging
import math
from typing import List, Optional, Sequence, Tuple

import networkx as nx

from ...data.distance_utils import haversine_distance, midpoint
from ...data.models import Point
from ..safety.safety_index import SafetyIndex

logger = logging.getLogger(__name__)

NodeKey = Tuple[float, float]


def safety_penalty(score: float) -> float:
    """
    Cost multiplier for a safety score.

    Ranges from 1.0 for a score of 100 to 5.0 for a score of 0. Scores outside
    [0, 100] are clamped first.
    """
    normalized = max(0.0, min(100.0, float(score)))
    return 1.0 + 4.0 * (100.0 - normalized) / 100.0


def node_key(point: Point) -> NodeKey:
    return (round(point.lat, 6), round(point.lng, 6))


def sample_path(path: Sequence[Point], max_nodes: int) -> List[Point]:
    """
    Thin a path to at most ``max_nodes`` points, always keeping both endpoints.
    """
    points = [Point.from_any(p) for p in path]
    if len(points) <= max_nodes or max_nodes < 2:
        return points

    stride = math.ceil((len(points) - 1) / (max_nodes - 1))
    sampled = points[::stride]
    if sampled[-1] != points[-1]:
        sampled.append(points[-1])
    return sampled


def build_path_graph(paths: Sequence[Sequence[Point]], safety_index: SafetyIndex,
                     max_nodes: int = 500) -> nx.Graph:
    """
    Build an undirected search graph from one or more paths.

    The first path defines the source and target nodes. Additional paths are
    attached to those same nodes so they form genuine alternatives between the
    two endpoints. Points that round to the same key share one node.

    Args:
        paths: Base path first, then alternatives
        safety_index: Index used to score edge midpoints
        max_nodes: Node budget per path

    Returns:
        Graph with ``source`` and ``target`` in ``graph.graph``
    """
    graph = nx.Graph()
    usable = [p for p in paths if p and len(p) >= 2]
    if not usable:
        return graph

    base = sample_path(usable[0], max_nodes)
    source_key = node_key(base[0])
    target_key = node_key(base[-1])
    graph.graph['source'] = source_key
    graph.graph['target'] = target_key

    _add_chain(graph, base, safety_index)

    for alternative in usable[1:]:
        points = sample_path(alternative, max_nodes)
        # Pin the alternative's ends onto the shared endpoints
        points = [base[0]] + points[1:-1] + [base[-1]]
        _add_chain(graph, points, safety_index)

    logger.debug(f"Built path graph with {graph.number_of_nodes()} nodes, "
                 f"{graph.number_of_edges()} edges from {len(usable)} paths")
    return graph


def _add_chain(graph: nx.Graph, points: Sequence[Point], safety_index: SafetyIndex) -> None:
    previous: Optional[Point] = None
    for point in points:
        key = node_key(point)
        if key not in graph:
            graph.add_node(key, y=point.lat, x=point.lng)
        if previous is not None:
            prev_key = node_key(previous)
            if prev_key != key:
                _add_edge(graph, prev_key, key, previous, point, safety_index)
        previous = point


def _add_edge(graph: nx.Graph, u: NodeKey, v: NodeKey, a: Point, b: Point,
              safety_index: SafetyIndex) -> None:
    length = haversine_distance(a, b)
    if graph.has_edge(u, v) and graph.edges[u, v]['length'] <= length:
        return

    score = safety_index.score_for_point(midpoint(a, b))
    penalty = safety_penalty(score)
    graph.add_edge(
        u, v,
        length=length,
        safety_score=score,
        penalty=penalty,
        weighted_length=length * penalty,
    )


def node_point(graph: nx.Graph, key: NodeKey) -> Point:
    data = graph.nodes[key]
    return Point(data['y'], data['x'])
