"""Puzzle document ingestion with JSON support and a built-in sample."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from ..pipeline import PipelinePhase

logger = logging.getLogger(__name__)


class PuzzleIngestionPhase(PipelinePhase):
    phase_name = "ingestion"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        input_path = context.get("input_path")
        settings = context.get("settings")
        default_modulus = getattr(settings, "default_modulus", 8)

        if not input_path:
            logger.info("No puzzle file given, using the built-in sample puzzle")
            return {"input_path": input_path, "puzzle_document": self._build_fallback_document()}

        try:
            raw = self._read_document(Path(str(input_path)))
            document = self._normalize_document(raw, default_modulus)
        except (OSError, ValueError) as error:
            return {"input_path": input_path, "error": f"Cannot load puzzle: {error}"}
        return {"input_path": input_path, "puzzle_document": document}

    @staticmethod
    def _build_fallback_document() -> Dict[str, Any]:
        # Two nodes mod 3, node 0 also bumps node 1; one press of node 0 solves it.
        return {
            "node_count": 2,
            "modulus": 3,
            "edges": [[0, 1]],
            "initial": [0, 0],
            "goal": [1, 1],
        }

    @staticmethod
    def _read_document(input_path: Path) -> Any:
        if not input_path.exists():
            raise ValueError(f"file not found: {input_path}")
        text = input_path.read_text(encoding="utf-8")
        try:
            return json.loads(text)
        except json.JSONDecodeError as error:
            raise ValueError(f"json_decode_error: {error.msg} (line {error.lineno})") from None

    @staticmethod
    def _normalize_document(raw: Any, default_modulus: int) -> Dict[str, Any]:
        if not isinstance(raw, dict):
            raise ValueError("puzzle document must be a JSON object")

        initial = raw.get("initial")
        goal = raw.get("goal", raw.get("target"))
        if not isinstance(initial, list) or not isinstance(goal, list):
            raise ValueError("puzzle document needs 'initial' and 'goal' lists")

        node_count = raw.get("node_count", len(initial))
        modulus = raw.get("modulus", default_modulus)

        raw_edges = raw.get("edges", [])
        if not isinstance(raw_edges, list):
            raise ValueError("puzzle document 'edges' must be a list")

        edges: List[List[int]] = []
        for edge in raw_edges:
            if isinstance(edge, dict):
                edges.append([edge.get("source", edge.get("from")), edge.get("target", edge.get("to"))])
            elif isinstance(edge, (list, tuple)) and len(edge) == 2:
                edges.append([edge[0], edge[1]])
            else:
                raise ValueError(f"edge must be [from, to] or an object, got {edge!r}")

        return {
            "node_count": node_count,
            "modulus": modulus,
            "edges": edges,
            "initial": list(initial),
            "goal": list(goal),
        }
