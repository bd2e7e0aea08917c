"""Shortest press sequences for directed increment-graph puzzles."""

from .config import SolverSettings, load_settings
from .graph_model import (
    GraphModel,
    InvalidConfiguration,
    InvalidMove,
    InvalidVector,
    PuzzleError,
    with_self_loops,
)
from .graph_orchestrator import PuzzleOrchestrator
from .observers import LoggingSearchObserver, NullSearchObserver, SearchObserver
from .pipeline import PipelinePhase, PipelineRunner
from .solver import SearchAborted, SearchOutcome, Solution, Unreachable, replay, solve

__all__ = [
    "GraphModel",
    "PuzzleError",
    "InvalidConfiguration",
    "InvalidVector",
    "InvalidMove",
    "with_self_loops",
    "solve",
    "replay",
    "Solution",
    "Unreachable",
    "SearchAborted",
    "SearchOutcome",
    "SearchObserver",
    "NullSearchObserver",
    "LoggingSearchObserver",
    "PuzzleOrchestrator",
    "SolverSettings",
    "load_settings",
    "PipelinePhase",
    "PipelineRunner",
]
