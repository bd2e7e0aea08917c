"""Increment-graph model: node values in Z/mZ and the press transition."""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

StateVector = Tuple[int, ...]
EdgePair = Tuple[int, int]


class PuzzleError(ValueError):
    """Base class for rejected puzzle inputs."""


class InvalidConfiguration(PuzzleError):
    pass


class InvalidVector(PuzzleError):
    pass


class InvalidMove(PuzzleError):
    pass


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def with_self_loops(edges: Iterable[EdgePair], node_count: int) -> List[EdgePair]:
    """Return ``edges`` plus a ``(i, i)`` loop for every node that lacks one."""
    result = [tuple(edge) for edge in edges]
    present = {source for source, target in result if source == target}
    for index in range(node_count):
        if index not in present:
            result.append((index, index))
    return result


@dataclass(frozen=True)
class GraphModel:
    node_count: int
    modulus: int
    adjacency: Tuple[Tuple[int, ...], ...]

    @classmethod
    def construct(
        cls, node_count: int, modulus: int, edges: Iterable[Sequence[int]]
    ) -> "GraphModel":
        if not _is_int(node_count) or node_count <= 0:
            raise InvalidConfiguration(f"node_count must be a positive integer, got {node_count!r}")
        if not _is_int(modulus) or modulus <= 0:
            raise InvalidConfiguration(f"modulus must be a positive integer, got {modulus!r}")

        targets: Dict[int, List[int]] = {index: [] for index in range(node_count)}
        seen = set()
        for edge in edges:
            try:
                source, target = edge
            except (TypeError, ValueError):
                raise InvalidConfiguration(f"Edge must be a (from, to) pair, got {edge!r}") from None
            for endpoint in (source, target):
                if not _is_int(endpoint) or not 0 <= endpoint < node_count:
                    raise InvalidConfiguration(
                        f"Edge {source}->{target} references node outside [0, {node_count})"
                    )
            # A repeated edge would increment its target twice per press.
            if (source, target) in seen:
                continue
            seen.add((source, target))
            targets[source].append(target)

        adjacency = tuple(tuple(targets[index]) for index in range(node_count))
        return cls(node_count=node_count, modulus=modulus, adjacency=adjacency)

    def apply(self, vector: Sequence[int], node: int) -> StateVector:
        """Press ``node``: bump each of its targets by one, mod ``modulus``."""
        if not _is_int(node) or not 0 <= node < self.node_count:
            raise InvalidMove(f"Move {node!r} is outside [0, {self.node_count})")
        values = list(vector)
        for target in self.adjacency[node]:
            values[target] = (values[target] + 1) % self.modulus
        return tuple(values)

    def matches(self, vector: Sequence[int], goal: Sequence[int]) -> bool:
        if len(vector) != len(goal):
            return False
        for current, expected in zip(vector, goal):
            if current != expected:
                return False
        return True

    def validate_vector(self, values: Sequence[int], label: str = "vector") -> StateVector:
        try:
            components = tuple(values)
        except TypeError:
            raise InvalidVector(f"{label} must be a sequence of integers") from None
        if len(components) != self.node_count:
            raise InvalidVector(
                f"{label} has {len(components)} components, expected {self.node_count}"
            )
        for index, value in enumerate(components):
            if not _is_int(value) or not 0 <= value < self.modulus:
                raise InvalidVector(
                    f"{label}[{index}] = {value!r} is outside [0, {self.modulus})"
                )
        return components

    def edges(self) -> List[EdgePair]:
        return [
            (source, target)
            for source, targets in enumerate(self.adjacency)
            for target in targets
        ]
