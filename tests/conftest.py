import pytest

from graph_puzzle.graph_model import GraphModel, with_self_loops

SETTING_VARIABLES = (
    "GRAPH_PUZZLE_ITERATION_CAP",
    "GRAPH_PUZZLE_ADD_SELF_LOOPS",
    "GRAPH_PUZZLE_DEFAULT_MODULUS",
    "GRAPH_PUZZLE_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    # setenv first so monkeypatch restores the variable's absence afterwards,
    # even when a test loads it from a .env file.
    for name in SETTING_VARIABLES:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def two_node_model() -> GraphModel:
    """n=2, m=3, self-loops on both nodes, plus 0 -> 1."""
    return GraphModel.construct(2, 3, with_self_loops([(0, 1)], 2))


@pytest.fixture
def single_node_model() -> GraphModel:
    return GraphModel.construct(1, 4, [(0, 0)])
