"""Configuration phase: puzzle document to orchestrator to GraphModel."""

import logging
from typing import Any, Dict

from ..graph_model import PuzzleError
from ..graph_orchestrator import PuzzleOrchestrator
from ..pipeline import PipelinePhase

logger = logging.getLogger(__name__)


class ConfigurationPhase(PipelinePhase):
    phase_name = "configuration"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        document = context.get("puzzle_document", {})
        settings = context.get("settings")
        add_self_loops = getattr(settings, "add_self_loops", True)

        try:
            orchestrator = PuzzleOrchestrator(
                node_count=document.get("node_count"),
                modulus=document.get("modulus"),
            )
            for source, target in document.get("edges", []):
                orchestrator.add_edge(source, target)
            added_loops = orchestrator.add_self_loops_if_needed() if add_self_loops else []
            orchestrator.set_initial_values(document.get("initial", []))
            orchestrator.set_target_values(document.get("goal", []))
            model = orchestrator.build_model()
        except PuzzleError as error:
            logger.warning("Puzzle configuration rejected: %s", error)
            return {"error": str(error), "error_kind": type(error).__name__}

        if added_loops:
            logger.debug("Added %s self-loop edge(s)", len(added_loops))
        return {
            "orchestrator": orchestrator,
            "model": model,
            "configuration_report": {
                "node_count": model.node_count,
                "modulus": model.modulus,
                "edge_count": len(orchestrator.state.edges),
                "self_loops_added": len(added_loops),
            },
        }
