"""Breadth-first shortest-path search over increment-graph states."""

from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Sequence, Set, Tuple, Union

from .graph_model import GraphModel, StateVector
from .observers import NullSearchObserver, SearchObserver


@dataclass(frozen=True)
class Solution:
    moves: Tuple[int, ...]
    iterations: int
    states_visited: int
    status = "solved"


@dataclass(frozen=True)
class Unreachable:
    """The whole reachable state space was explored without meeting the goal."""

    iterations: int
    states_visited: int
    status = "unreachable"


@dataclass(frozen=True)
class SearchAborted:
    """The iteration cap stopped the search; the goal may still be reachable."""

    iterations: int
    states_visited: int
    iteration_cap: int
    status = "aborted"


SearchOutcome = Union[Solution, Unreachable, SearchAborted]


def solve(
    model: GraphModel,
    initial: Sequence[int],
    goal: Sequence[int],
    iteration_cap: Optional[int] = None,
    observer: Optional[SearchObserver] = None,
) -> SearchOutcome:
    """Find the shortest move sequence turning ``initial`` into ``goal``.

    Among equally short solutions the one whose moves come first in
    ascending node order is returned. ``iteration_cap`` bounds the number of
    dequeued states; ``None`` searches until the frontier is exhausted.
    """
    if iteration_cap is not None and iteration_cap < 1:
        raise ValueError(f"iteration_cap must be at least 1, got {iteration_cap}")
    start = model.validate_vector(initial, "initial")
    target = model.validate_vector(goal, "goal")
    observer = observer or NullSearchObserver()

    frontier: Deque[Tuple[StateVector, Tuple[int, ...]]] = deque([(start, ())])
    visited: Set[StateVector] = {start}
    iterations = 0
    observer.search_started(model, start, target)

    while frontier:
        if iteration_cap is not None and iterations >= iteration_cap:
            outcome: SearchOutcome = SearchAborted(
                iterations=iterations,
                states_visited=len(visited),
                iteration_cap=iteration_cap,
            )
            observer.search_finished(outcome)
            return outcome

        state, moves = frontier.popleft()
        iterations += 1
        observer.state_dequeued(state, moves, iterations)

        if model.matches(state, target):
            outcome = Solution(moves=moves, iterations=iterations, states_visited=len(visited))
            observer.search_finished(outcome)
            return outcome

        for node in range(model.node_count):
            successor = model.apply(state, node)
            if successor in visited:
                continue
            visited.add(successor)
            frontier.append((successor, moves + (node,)))

    outcome = Unreachable(iterations=iterations, states_visited=len(visited))
    observer.search_finished(outcome)
    return outcome


def replay(model: GraphModel, initial: Sequence[int], moves: Sequence[int]) -> List[StateVector]:
    """States visited while applying ``moves``, starting with ``initial``."""
    current = model.validate_vector(initial, "initial")
    states = [current]
    for node in moves:
        current = model.apply(current, node)
        states.append(current)
    return states
