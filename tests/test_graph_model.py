"""
Tests for the increment-graph model: construction, the press transition and
vector validation.
"""
import pytest

from graph_puzzle.graph_model import (
    GraphModel,
    InvalidConfiguration,
    InvalidMove,
    InvalidVector,
    PuzzleError,
    with_self_loops,
)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruct:
    def test_builds_adjacency_in_edge_order(self):
        model = GraphModel.construct(3, 5, [(0, 2), (0, 1), (2, 2)])
        assert model.adjacency == ((2, 1), (), (2,))

    def test_duplicate_edges_are_dropped(self):
        model = GraphModel.construct(2, 3, [(0, 1), (0, 1), (0, 0), (0, 1)])
        assert model.adjacency[0] == (1, 0)
        assert model.apply((0, 0), 0) == (1, 1)

    def test_no_implicit_self_loops(self):
        model = GraphModel.construct(2, 3, [(0, 1)])
        assert 0 not in model.adjacency[0]

    @pytest.mark.parametrize("node_count", [0, -1, 2.0, True, "3"])
    def test_rejects_bad_node_count(self, node_count):
        with pytest.raises(InvalidConfiguration):
            GraphModel.construct(node_count, 3, [])

    @pytest.mark.parametrize("modulus", [0, -4, None])
    def test_rejects_bad_modulus(self, modulus):
        with pytest.raises(InvalidConfiguration):
            GraphModel.construct(2, modulus, [])

    @pytest.mark.parametrize("edge", [(0, 2), (-1, 0), (2, 2), (0, 1.5)])
    def test_rejects_out_of_range_endpoint(self, edge):
        with pytest.raises(InvalidConfiguration):
            GraphModel.construct(2, 3, [edge])

    def test_rejects_malformed_edge(self):
        with pytest.raises(InvalidConfiguration):
            GraphModel.construct(2, 3, [(0, 1, 1)])

    def test_errors_are_value_errors(self):
        assert issubclass(InvalidConfiguration, PuzzleError)
        assert issubclass(PuzzleError, ValueError)

    def test_model_is_immutable_and_hashable(self, two_node_model):
        with pytest.raises(AttributeError):
            two_node_model.modulus = 5
        assert hash(two_node_model) == hash(GraphModel.construct(2, 3, [(0, 1), (0, 0), (1, 1)]))

    def test_edges_round_trip_through_adjacency(self):
        model = GraphModel.construct(3, 2, [(1, 0), (0, 2), (1, 0)])
        assert model.edges() == [(0, 2), (1, 0)]


# ---------------------------------------------------------------------------
# Transition
# ---------------------------------------------------------------------------

class TestApply:
    def test_increments_every_target(self, two_node_model):
        assert two_node_model.apply((0, 0), 0) == (1, 1)
        assert two_node_model.apply((0, 0), 1) == (0, 1)

    def test_wraps_around_modulus(self, two_node_model):
        assert two_node_model.apply((2, 2), 0) == (0, 0)

    def test_does_not_touch_input(self, two_node_model):
        values = [1, 2]
        two_node_model.apply(values, 0)
        assert values == [1, 2]

    def test_returns_tuple(self, two_node_model):
        assert isinstance(two_node_model.apply([0, 0], 1), tuple)

    def test_node_without_self_loop_is_unchanged(self):
        model = GraphModel.construct(3, 5, [(0, 1), (0, 2)])
        assert model.apply((4, 0, 0), 0) == (4, 1, 1)

    def test_unreached_components_are_unchanged(self):
        model = GraphModel.construct(4, 3, [(1, 2), (1, 1)])
        before = (2, 0, 1, 2)
        after = model.apply(before, 1)
        assert after[0] == before[0]
        assert after[3] == before[3]

    @pytest.mark.parametrize("node", [0, 1, 2])
    def test_modulus_presses_restore_state(self, node):
        model = GraphModel.construct(3, 4, with_self_loops([(0, 1), (1, 2), (2, 0)], 3))
        start = (1, 3, 0)
        state = start
        for _ in range(model.modulus):
            state = model.apply(state, node)
        assert state == start

    @pytest.mark.parametrize("node", [-1, 2, 1.0])
    def test_rejects_invalid_move(self, two_node_model, node):
        with pytest.raises(InvalidMove):
            two_node_model.apply((0, 0), node)


class TestMatches:
    def test_structural_equality(self, two_node_model):
        assert two_node_model.matches((1, 2), [1, 2])
        assert not two_node_model.matches((1, 2), (2, 1))

    def test_length_mismatch_never_matches(self, two_node_model):
        assert not two_node_model.matches((1,), (1, 0))


class TestValidateVector:
    def test_returns_tuple(self, two_node_model):
        assert two_node_model.validate_vector([2, 0]) == (2, 0)

    @pytest.mark.parametrize("values", [[0], [0, 0, 0], [0, 3], [-1, 0], [0, "1"], [0, False]])
    def test_rejects_mismatched_vectors(self, two_node_model, values):
        with pytest.raises(InvalidVector):
            two_node_model.validate_vector(values, "goal")

    def test_message_names_the_vector(self, two_node_model):
        with pytest.raises(InvalidVector, match="initial"):
            two_node_model.validate_vector([0, 9], "initial")


class TestWithSelfLoops:
    def test_adds_only_missing_loops(self):
        edges = with_self_loops([(0, 1), (1, 1)], 3)
        assert edges == [(0, 1), (1, 1), (0, 0), (2, 2)]

    def test_does_not_mutate_input(self):
        edges = [(0, 1)]
        with_self_loops(edges, 2)
        assert edges == [(0, 1)]
