"""Hooks for tracing a search without coupling the solver to logging."""

import logging
from typing import Any, Dict, List, Sequence

logger = logging.getLogger(__name__)


class SearchObserver:
    """Receives search events. Every hook is a no-op by default."""

    def search_started(self, model: Any, start: Sequence[int], goal: Sequence[int]) -> None:
        pass

    def state_dequeued(self, state: Sequence[int], moves: Sequence[int], iteration: int) -> None:
        pass

    def search_finished(self, outcome: Any) -> None:
        pass


class NullSearchObserver(SearchObserver):
    pass


class LoggingSearchObserver(SearchObserver):
    def __init__(self, progress_every: int = 1000) -> None:
        self.progress_every = progress_every

    def search_started(self, model: Any, start: Sequence[int], goal: Sequence[int]) -> None:
        logger.debug(
            "Starting search: nodes=%s modulus=%s start=%s goal=%s",
            model.node_count,
            model.modulus,
            list(start),
            list(goal),
        )

    def state_dequeued(self, state: Sequence[int], moves: Sequence[int], iteration: int) -> None:
        if self.progress_every and iteration % self.progress_every == 0:
            logger.debug(
                "Search progress: iteration=%s depth=%s state=%s",
                iteration,
                len(moves),
                list(state),
            )

    def search_finished(self, outcome: Any) -> None:
        logger.info(
            "Search finished: status=%s iterations=%s states_visited=%s",
            outcome.status,
            outcome.iterations,
            outcome.states_visited,
        )


class RecordingSearchObserver(SearchObserver):
    """Keeps every event in memory; meant for tests and small puzzles."""

    def __init__(self) -> None:
        self.events: List[Dict[str, Any]] = []

    def search_started(self, model: Any, start: Sequence[int], goal: Sequence[int]) -> None:
        self.events.append({"event": "started", "start": tuple(start), "goal": tuple(goal)})

    def state_dequeued(self, state: Sequence[int], moves: Sequence[int], iteration: int) -> None:
        self.events.append(
            {"event": "dequeued", "state": tuple(state), "moves": tuple(moves), "iteration": iteration}
        )

    def search_finished(self, outcome: Any) -> None:
        self.events.append({"event": "finished", "status": outcome.status})
