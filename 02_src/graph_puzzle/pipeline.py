"""Solve pipeline abstractions and sequential runner."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List

logger = logging.getLogger(__name__)


class PipelinePhase(ABC):
    phase_name: str
    # Phases that report on a failed run set this to True.
    runs_after_error: bool = False

    @abstractmethod
    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError


class PipelineRunner:
    def __init__(self, phases: Iterable[PipelinePhase]) -> None:
        self.phases: List[PipelinePhase] = list(phases)

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        current = dict(context)
        for phase in self.phases:
            if current.get("error") and not phase.runs_after_error:
                logger.debug("Skipping phase '%s' after error", phase.phase_name)
                continue
            logger.debug("Running phase '%s'", phase.phase_name)
            phase_result = phase.run(current)
            if not isinstance(phase_result, dict):
                raise TypeError(f"Phase '{phase.phase_name}' must return dict context.")
            current.update(phase_result)
        return current
