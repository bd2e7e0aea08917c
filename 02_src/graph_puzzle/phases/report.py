"""Report phase: outcome summary and step-by-step transformation."""

from typing import Any, Dict, List

from ..pipeline import PipelinePhase
from ..solver import SearchAborted, Solution, Unreachable


class ReportPhase(PipelinePhase):
    phase_name = "report"
    runs_after_error = True

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        if context.get("error"):
            return {
                "report": {
                    "status": "invalid",
                    "error": context["error"],
                    "error_kind": context.get("error_kind", "PuzzleError"),
                    "lines": [f"Error generating solution: {context['error']}"],
                }
            }

        outcome = context["outcome"]
        report: Dict[str, Any] = {
            "status": outcome.status,
            "iterations": outcome.iterations,
            "states_visited": outcome.states_visited,
        }
        if isinstance(outcome, Solution):
            states = context.get("intermediate_states", [])
            report["moves"] = list(outcome.moves)
            report["move_count"] = len(outcome.moves)
            report["states"] = states
            report["lines"] = self._solution_lines(list(outcome.moves), states)
        elif isinstance(outcome, SearchAborted):
            report["iteration_cap"] = outcome.iteration_cap
            report["lines"] = [
                f"Search stopped after {outcome.iterations} iterations without a result.",
                "Raise the iteration cap to keep searching.",
            ]
        elif isinstance(outcome, Unreachable):
            report["lines"] = ["No solution found for this puzzle configuration."]
        return {"report": report}

    @staticmethod
    def _solution_lines(moves: List[int], states: List[List[int]]) -> List[str]:
        lines = [
            f"Solution found! Moves required: {len(moves)}",
            "Sequence of nodes to increment:",
            " ".join(str(move) for move in moves),
            "",
            "Step-by-step transformation:",
        ]
        if states:
            lines.append(f"Initial state: {' '.join(str(value) for value in states[0])}")
        for move, values in zip(moves, states[1:]):
            lines.append(
                f"After incrementing node {move}: {' '.join(str(value) for value in values)}"
            )
        return lines
