"""
Path graph and search engine tests.
"""

import pytest

from safe_routing.algorithms.routing import PathSearchEngine, build_path_graph, safety_penalty
from safe_routing.algorithms.safety import SafetyIndex
from safe_routing.data import Point
from safe_routing.data.distance_utils import path_length

from conftest import DESTINATION, MIDPOINT, SOURCE, polyline, straight_line


@pytest.fixture
def risky_index(area_table, risky_zone):
    return SafetyIndex([risky_zone], area_table)


@pytest.fixture
def base_path():
    return straight_line(SOURCE, DESTINATION, 40)


@pytest.fixture
def detour():
    # Swings about 4 km away from the risky midpoint
    return polyline([SOURCE, Point(17.685, 83.345), DESTINATION])


class TestSafetyPenalty:

    def test_bounds(self):
        assert safety_penalty(100) == 1.0
        assert safety_penalty(0) == 5.0
        assert safety_penalty(70) == pytest.approx(2.2)

    def test_clamped(self):
        assert safety_penalty(150) == 1.0
        assert safety_penalty(-20) == 5.0


class TestPathGraph:

    def test_nodes_and_edges(self, risky_index, base_path):
        graph = build_path_graph([base_path], risky_index)
        assert graph.number_of_nodes() == 40
        assert graph.number_of_edges() == 39
        assert graph.graph['source'] == (SOURCE.lat, SOURCE.lng)

        node = graph.nodes[graph.graph['target']]
        assert (node['y'], node['x']) == (DESTINATION.lat, DESTINATION.lng)

        for _, _, data in graph.edges(data=True):
            assert data['safety_score'] == 30
            assert data['weighted_length'] == pytest.approx(data['length'] * 3.8)

    def test_alternatives_share_endpoints(self, risky_index, base_path, detour):
        graph = build_path_graph([base_path, detour], risky_index)
        assert graph.degree(graph.graph['source']) == 2
        assert graph.degree(graph.graph['target']) == 2

    def test_node_budget(self, risky_index):
        long_path = straight_line(SOURCE, DESTINATION, 1000)
        graph = build_path_graph([long_path], risky_index, max_nodes=100)
        assert graph.number_of_nodes() <= 101
        assert graph.graph['target'] == (DESTINATION.lat, DESTINATION.lng)

    def test_empty_input(self, risky_index):
        assert build_path_graph([], risky_index).number_of_nodes() == 0


class TestFastest:

    def test_follows_base_path(self, risky_index, base_path):
        result = PathSearchEngine(risky_index).fastest(base_path)
        assert result.algorithm == 'dijkstra'
        assert result.total_distance == pytest.approx(path_length(base_path))
        assert result.safety_score == 30
        assert result.path[0] == SOURCE
        assert result.path[-1] == DESTINATION
        assert not result.fallback_used

    def test_degenerate_path(self, risky_index):
        result = PathSearchEngine(risky_index).fastest([SOURCE])
        assert result.total_distance == 0
        assert result.safety_score == 70

    def test_summary(self, risky_index, base_path):
        summary = PathSearchEngine(risky_index).fastest(base_path).get_summary()
        assert summary['algorithm'] == 'dijkstra'
        assert summary['risk_level'] == 'risky'
        assert summary['node_count'] == 40


class TestSafest:

    def test_never_worse_than_fastest(self, risky_index, base_path, detour):
        engine = PathSearchEngine(risky_index)
        fastest = engine.fastest(base_path)
        safest = engine.safest(base_path, alternatives=[detour], fastest=fastest)

        assert safest.total_distance >= fastest.total_distance
        assert safest.safety_score >= fastest.safety_score
        assert safest.total_distance <= fastest.total_distance + engine.config.max_extra_distance

    def test_without_alternatives_keeps_base(self, area_table, base_path):
        engine = PathSearchEngine(SafetyIndex([], area_table))
        fastest = engine.fastest(base_path)
        safest = engine.safest(base_path, alternatives=[], fastest=fastest)
        assert safest.path == fastest.path
        assert safest.total_distance == pytest.approx(fastest.total_distance)

    def test_degenerate_path(self, risky_index):
        result = PathSearchEngine(risky_index).safest([SOURCE])
        assert result.algorithm == 'astar_safest'
        assert result.total_distance == 0


class TestSyntheticAlternatives:

    def test_shifts_unsafe_samples(self, risky_index, base_path):
        alternatives = PathSearchEngine(risky_index).synthesize_safe_alternatives(base_path)
        assert len(alternatives) == 3
        for alternative in alternatives:
            assert alternative[0] == SOURCE
            assert alternative[-1] == DESTINATION
            assert alternative != base_path

    def test_safe_path_needs_no_detour(self, area_table, base_path):
        engine = PathSearchEngine(SafetyIndex([], area_table))
        assert engine.synthesize_safe_alternatives(base_path) == []


class TestOptimized:

    def test_within_bound(self, risky_index, base_path, detour):
        engine = PathSearchEngine(risky_index)
        fastest = engine.fastest(base_path)
        safest = engine.safest(base_path, alternatives=[detour], fastest=fastest)
        optimized = engine.optimized(base_path, fastest, safest, [detour])

        bound = (fastest.total_distance + safest.total_distance) / 2 + engine.config.optimized_extra_distance
        assert optimized.total_distance <= bound
        assert optimized.path[0] == SOURCE
        assert optimized.path[-1] == DESTINATION
