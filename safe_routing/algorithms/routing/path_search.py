"""
Fastest, safest and optimized path search over route geometries.
"""

import heapq
import itertools
import logging
import math
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import networkx as nx

from ...config.routing_config import RoutingConfig
from ...data.distance_utils import bearing, haversine_distance, offset_point, path_length
from ...data.models import Point, RiskLevel, risk_level_for_score
from ..safety.safety_index import SafetyIndex
from .path_graph import NodeKey, build_path_graph, node_point, safety_penalty

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Container for a searched path and its metrics."""
    path: Tuple[Point, ...]
    total_distance: float
    safety_score: int
    algorithm: str
    fallback_used: bool = False
    calculation_time: Optional[float] = None

    @property
    def risk_level(self) -> RiskLevel:
        return risk_level_for_score(self.safety_score)

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics for the search result."""
        return {
            'algorithm': self.algorithm,
            'node_count': len(self.path),
            'total_distance_m': round(self.total_distance, 1),
            'safety_score': self.safety_score,
            'risk_level': self.risk_level.value,
            'fallback_used': self.fallback_used,
            'calculation_time_ms': round(self.calculation_time * 1000, 1) if self.calculation_time else None
        }


EdgeCost = Callable[[Dict[str, Any]], float]


class PathSearchEngine:
    """
    Runs the three route searches against a safety index.

    fastest: Dijkstra over edge length.
    safest: A* over length * safety penalty, with a penalized heuristic and a
        cap on travelled distance relative to the fastest route.
    optimized: A* over an even blend of plain and penalized length.
    """

    def __init__(self, safety_index: SafetyIndex, config: Optional[RoutingConfig] = None):
        """
        Initialize the search engine.

        Args:
            safety_index: Safety index for the current zone snapshot
            config: Routing configuration parameters
        """
        self.safety_index = safety_index
        self.config = config or safety_index.config

    def _degenerate(self, base_path: Sequence[Point], algorithm: str) -> SearchResult:
        return SearchResult(
            path=tuple(Point.from_any(p) for p in base_path),
            total_distance=0.0,
            safety_score=self.config.neutral_score,
            algorithm=algorithm,
        )

    def _result(self, path: Sequence[Point], algorithm: str, start_time: float,
                fallback_used: bool = False) -> SearchResult:
        analysis = self.safety_index.score_for_path(path)
        return SearchResult(
            path=tuple(path),
            total_distance=path_length(path),
            safety_score=analysis.overall_score,
            algorithm=algorithm,
            fallback_used=fallback_used,
            calculation_time=time.time() - start_time,
        )

    def _fallback(self, fastest: SearchResult, algorithm: str, reason: str) -> SearchResult:
        logger.warning(f"{algorithm}: {reason} - using fastest route")
        return SearchResult(
            path=fastest.path,
            total_distance=fastest.total_distance,
            safety_score=fastest.safety_score,
            algorithm=f"{algorithm}_fallback",
            fallback_used=True,
            calculation_time=fastest.calculation_time,
        )

    def fastest(self, base_path: Sequence[Point]) -> SearchResult:
        """
        Find the shortest route along the base path.

        Args:
            base_path: Provider route geometry

        Returns:
            SearchResult for the shortest path
        """
        if len(base_path) < 2:
            return self._degenerate(base_path, 'dijkstra')

        start_time = time.time()
        graph = build_path_graph([base_path], self.safety_index, self.config.max_graph_nodes)
        source, target = graph.graph['source'], graph.graph['target']
        if source == target:
            return self._degenerate(base_path, 'dijkstra')

        nodes = nx.shortest_path(graph, source, target, weight='length')
        path = [node_point(graph, n) for n in nodes]

        result = self._result(path, 'dijkstra', start_time)
        logger.debug(f"Fastest route: {result.total_distance:.0f}m, safety {result.safety_score}")
        return result

    def safest(self, base_path: Sequence[Point],
               alternatives: Optional[Sequence[Sequence[Point]]] = None,
               fastest: Optional[SearchResult] = None) -> SearchResult:
        """
        Find the safest route within the allowed extra distance.

        Args:
            base_path: Provider route geometry
            alternatives: Alternative geometries between the same endpoints;
                when None they are synthesized by shifting unsafe samples
            fastest: Precomputed fastest result for the base path

        Returns:
            SearchResult; the fastest route with ``fallback_used`` set when no
            route improves on it within the bound
        """
        if len(base_path) < 2:
            return self._degenerate(base_path, 'astar_safest')

        fastest = fastest or self.fastest(base_path)
        if fastest.total_distance == 0:
            return self._degenerate(base_path, 'astar_safest')

        start_time = time.time()
        if alternatives is None:
            alternatives = self.synthesize_safe_alternatives(base_path)

        graph = build_path_graph([base_path, *alternatives], self.safety_index,
                                 self.config.max_graph_nodes)
        bound = fastest.total_distance + self.config.max_extra_distance

        nodes = self._astar(
            graph,
            edge_cost=lambda data: data['weighted_length'],
            penalized_heuristic=True,
            distance_bound=bound,
        )
        if nodes is None:
            return self._fallback(fastest, 'astar_safest', f"no route within {bound:.0f}m")

        result = self._result([node_point(graph, n) for n in nodes], 'astar_safest', start_time)
        if result.total_distance < fastest.total_distance or result.safety_score < fastest.safety_score:
            return self._fallback(fastest, 'astar_safest', "no safer route found")

        logger.debug(f"Safest route: {result.total_distance:.0f}m, safety {result.safety_score}")
        return result

    def optimized(self, base_path: Sequence[Point], fastest: SearchResult, safest: SearchResult,
                  alternatives: Optional[Sequence[Sequence[Point]]] = None) -> SearchResult:
        """
        Find a route balancing distance and safety.

        Args:
            base_path: Provider route geometry
            fastest: Fastest search result
            safest: Safest search result
            alternatives: Alternative geometries between the same endpoints

        Returns:
            SearchResult for the blended-cost route
        """
        if len(base_path) < 2:
            return self._degenerate(base_path, 'astar_optimized')

        start_time = time.time()
        paths = [base_path, *(alternatives or ())]
        if safest.path and not safest.fallback_used:
            paths.append(safest.path)

        graph = build_path_graph(paths, self.safety_index, self.config.max_graph_nodes)
        if graph.graph.get('source') == graph.graph.get('target'):
            return self._degenerate(base_path, 'astar_optimized')

        bound = (fastest.total_distance + safest.total_distance) / 2 + self.config.optimized_extra_distance

        nodes = self._astar(
            graph,
            edge_cost=lambda data: 0.5 * data['length'] + 0.5 * data['weighted_length'],
            penalized_heuristic=False,
            distance_bound=bound,
        )
        if nodes is None:
            return self._fallback(fastest, 'astar_optimized', f"no route within {bound:.0f}m")

        result = self._result([node_point(graph, n) for n in nodes], 'astar_optimized', start_time)
        logger.debug(f"Optimized route: {result.total_distance:.0f}m, safety {result.safety_score}")
        return result

    def _astar(self, graph: nx.Graph, edge_cost: EdgeCost, penalized_heuristic: bool,
               distance_bound: float) -> Optional[List[NodeKey]]:
        """
        A* from the graph's source to its target.

        Labels whose travelled distance would exceed ``distance_bound`` are
        dropped. The bound is in plain meters, not in weighted cost. Ties in
        priority are broken by insertion order.

        Returns:
            Node keys from source to target, or None if the target is unreachable
        """
        source = graph.graph['source']
        target = graph.graph['target']
        target_point = node_point(graph, target)
        score_cache: Dict[NodeKey, int] = {}

        def heuristic(node: NodeKey) -> float:
            point = node_point(graph, node)
            remaining = haversine_distance(point, target_point)
            if not penalized_heuristic:
                return remaining
            if node not in score_cache:
                score_cache[node] = self.safety_index.score_for_point(point)
            return remaining * safety_penalty(score_cache[node])

        counter = itertools.count()
        g_score: Dict[NodeKey, float] = {source: 0.0}
        travelled: Dict[NodeKey, float] = {source: 0.0}
        previous: Dict[NodeKey, NodeKey] = {}
        closed = set()
        heap = [(heuristic(source), next(counter), source)]

        while heap:
            _, _, current = heapq.heappop(heap)
            if current == target:
                break
            if current in closed:
                continue
            closed.add(current)

            for neighbor, data in graph[current].items():
                if neighbor in closed:
                    continue
                distance = travelled[current] + data['length']
                if distance > distance_bound:
                    continue
                tentative = g_score[current] + edge_cost(data)
                if tentative < g_score.get(neighbor, math.inf):
                    g_score[neighbor] = tentative
                    travelled[neighbor] = distance
                    previous[neighbor] = current
                    heapq.heappush(heap, (tentative + heuristic(neighbor), next(counter), neighbor))
        else:
            return None

        nodes = [target]
        while nodes[-1] != source:
            nodes.append(previous[nodes[-1]])
        nodes.reverse()
        return nodes

    def synthesize_safe_alternatives(self, base_path: Sequence[Point]) -> List[List[Point]]:
        """
        Build left, right and optimal detours around unsafe samples of a path.

        Samples scoring below ``unsafe_sample_score`` are shifted perpendicular
        to the overall direction of travel. Offsets are tried in increasing
        order until the shifted point scores better than the original.

        Returns:
            Alternative paths that differ from the base path (may be empty)
        """
        points = [Point.from_any(p) for p in base_path]
        source, destination = points[0], points[-1]
        if source == destination:
            return []

        main_bearing = bearing(source, destination)
        stride = max(1, len(points) // 20)
        samples = [(points[i], self.safety_index.score_for_point(points[i]))
                   for i in range(stride, len(points) - stride, stride)]

        alternatives = []
        for strategy in ('optimal', 'left', 'right'):
            waypoints = [source]
            shifted_any = False
            for point, score in samples:
                shifted = point
                if score < self.config.unsafe_sample_score:
                    shifted = self._shift_point(point, score, main_bearing, strategy)
                    shifted_any = shifted_any or shifted != point
                waypoints.append(shifted)
            waypoints.append(destination)
            if shifted_any:
                alternatives.append(waypoints)

        logger.debug(f"Synthesized {len(alternatives)} safe alternatives from {len(samples)} samples")
        return alternatives

    def _shift_point(self, point: Point, score: int, main_bearing: float, strategy: str) -> Point:
        left_bearing = (main_bearing - 90.0) % 360.0
        right_bearing = (main_bearing + 90.0) % 360.0

        for offset in self.config.safe_waypoint_offsets:
            left = offset_point(point, left_bearing, offset)
            right = offset_point(point, right_bearing, offset)

            if strategy == 'left':
                if self.safety_index.score_for_point(left) > score:
                    return left
            elif strategy == 'right':
                if self.safety_index.score_for_point(right) > score:
                    return right
            else:
                left_score = self.safety_index.score_for_point(left)
                right_score = self.safety_index.score_for_point(right)
                if left_score >= right_score and left_score > score:
                    return left
                if right_score > score:
                    return right

        return point
