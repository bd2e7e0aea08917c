"""Solve phase powered by a LangGraph workflow around the BFS solver."""

import logging
from typing import Any, Dict, List, Optional

from langgraph.graph import END, START, StateGraph
from typing_extensions import TypedDict

from ..graph_model import GraphModel, InvalidVector
from ..graph_orchestrator import PuzzleOrchestrator
from ..observers import LoggingSearchObserver, SearchObserver
from ..pipeline import PipelinePhase
from ..solver import Solution, replay, solve

logger = logging.getLogger(__name__)


class SolveState(TypedDict):
    model: GraphModel
    initial: List[int]
    goal: List[int]
    iteration_cap: Optional[int]
    error: str
    outcome: Any
    states: List[List[int]]


class SolvePhase(PipelinePhase):
    phase_name = "solve"

    def __init__(self, observer: Optional[SearchObserver] = None) -> None:
        self._observer = observer

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        orchestrator: PuzzleOrchestrator = context["orchestrator"]
        settings = context.get("settings")
        # 0 means no cap, matching the environment and CLI settings.
        iteration_cap = getattr(settings, "iteration_cap", None) or None

        workflow = self._build_workflow()
        result_state = workflow.invoke(
            {
                "model": context["model"],
                "initial": list(orchestrator.state.initial_values),
                "goal": list(orchestrator.state.target_values),
                "iteration_cap": iteration_cap,
                "error": "",
                "outcome": None,
                "states": [],
            }
        )

        if result_state.get("error"):
            return {"error": result_state["error"], "error_kind": InvalidVector.__name__}
        return {
            "outcome": result_state["outcome"],
            "intermediate_states": result_state.get("states", []),
        }

    def _build_workflow(self):
        graph = StateGraph(SolveState)
        graph.add_node("check_vectors", self._check_vectors)
        graph.add_node("search", self._search)
        graph.add_node("replay", self._replay)
        graph.add_edge(START, "check_vectors")
        graph.add_conditional_edges(
            "check_vectors", self._route_after_check, {"search": "search", "end": END}
        )
        graph.add_conditional_edges(
            "search", self._route_after_search, {"replay": "replay", "end": END}
        )
        graph.add_edge("replay", END)
        return graph.compile()

    @staticmethod
    def _check_vectors(state: SolveState) -> Dict[str, Any]:
        model = state["model"]
        try:
            model.validate_vector(state.get("initial", []), "initial")
            model.validate_vector(state.get("goal", []), "goal")
        except InvalidVector as error:
            logger.warning("Rejected puzzle vectors: %s", error)
            return {"error": str(error)}
        return {"error": ""}

    def _search(self, state: SolveState) -> Dict[str, Any]:
        observer = self._observer or LoggingSearchObserver()
        outcome = solve(
            state["model"],
            state["initial"],
            state["goal"],
            iteration_cap=state.get("iteration_cap"),
            observer=observer,
        )
        return {"outcome": outcome}

    @staticmethod
    def _replay(state: SolveState) -> Dict[str, Any]:
        outcome = state["outcome"]
        states = replay(state["model"], state["initial"], outcome.moves)
        return {"states": [list(values) for values in states]}

    @staticmethod
    def _route_after_check(state: SolveState) -> str:
        return "end" if state.get("error") else "search"

    @staticmethod
    def _route_after_search(state: SolveState) -> str:
        return "replay" if isinstance(state.get("outcome"), Solution) else "end"
