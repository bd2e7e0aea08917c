"""Deterministic orchestrator for puzzle configuration state."""

from dataclasses import asdict, dataclass, field
from hashlib import sha1
from typing import Any, Dict, List, Sequence

from .graph_model import GraphModel, InvalidConfiguration, InvalidVector


@dataclass
class PuzzleEdge:
    id: str
    source: int
    target: int


@dataclass
class PuzzleState:
    node_count: int
    modulus: int
    edges: Dict[str, PuzzleEdge] = field(default_factory=dict)
    initial_values: List[int] = field(default_factory=list)
    target_values: List[int] = field(default_factory=list)


class PuzzleOrchestrator:
    """Owns edge identifiers and safe updates of a puzzle being configured."""

    def __init__(self, node_count: int, modulus: int) -> None:
        for name, value in (("node_count", node_count), ("modulus", modulus)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidConfiguration(f"{name} must be a positive integer, got {value!r}")
        self.state = PuzzleState(
            node_count=node_count,
            modulus=modulus,
            initial_values=[0] * node_count,
            target_values=[0] * node_count,
        )
        self._edge_registry: Dict[str, str] = {}

    def add_edge(self, source: int, target: int) -> str:
        self._require_node(source)
        self._require_node(target)

        edge_signature = f"{source}->{target}"
        existing_id = self._edge_registry.get(edge_signature)
        if existing_id:
            return existing_id

        edge_id = self._build_id("edge", edge_signature)
        self.state.edges[edge_id] = PuzzleEdge(id=edge_id, source=source, target=target)
        self._edge_registry[edge_signature] = edge_id
        return edge_id

    def remove_edge(self, source: int, target: int) -> bool:
        edge_id = self._edge_registry.pop(f"{source}->{target}", None)
        if edge_id is None:
            return False
        del self.state.edges[edge_id]
        return True

    def clear_edges(self) -> int:
        removed = len(self.state.edges)
        self.state.edges.clear()
        self._edge_registry.clear()
        return removed

    def add_self_loops_if_needed(self) -> List[str]:
        added: List[str] = []
        for index in range(self.state.node_count):
            if f"{index}->{index}" not in self._edge_registry:
                added.append(self.add_edge(index, index))
        return added

    def set_initial_value(self, index: int, value: int) -> None:
        self._require_node(index)
        self.state.initial_values[index] = self._require_value(value, f"initial[{index}]")

    def set_target_value(self, index: int, value: int) -> None:
        self._require_node(index)
        self.state.target_values[index] = self._require_value(value, f"goal[{index}]")

    def set_initial_values(self, values: Sequence[int]) -> None:
        self.state.initial_values = self._check_values(values, "initial")

    def set_target_values(self, values: Sequence[int]) -> None:
        self.state.target_values = self._check_values(values, "goal")

    def build_model(self) -> GraphModel:
        edge_pairs = [(edge.source, edge.target) for edge in self.state.edges.values()]
        return GraphModel.construct(self.state.node_count, self.state.modulus, edge_pairs)

    def to_json(self) -> Dict[str, Any]:
        return {
            "node_count": self.state.node_count,
            "modulus": self.state.modulus,
            "edges": [asdict(edge) for edge in self.state.edges.values()],
            "initial": list(self.state.initial_values),
            "goal": list(self.state.target_values),
        }

    def _check_values(self, values: Sequence[int], label: str) -> List[int]:
        components = list(values)
        if len(components) != self.state.node_count:
            raise InvalidVector(
                f"{label} has {len(components)} components, expected {self.state.node_count}"
            )
        return [
            self._require_value(value, f"{label}[{index}]")
            for index, value in enumerate(components)
        ]

    def _require_value(self, value: int, label: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidVector(f"{label} = {value!r} is not an integer")
        if not 0 <= value < self.state.modulus:
            raise InvalidVector(f"{label} = {value} is outside [0, {self.state.modulus})")
        return value

    def _require_node(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidConfiguration(f"Node index must be an integer, got {index!r}")
        if not 0 <= index < self.state.node_count:
            raise InvalidConfiguration(
                f"Node {index} is outside [0, {self.state.node_count})"
            )

    @staticmethod
    def _build_id(prefix: str, signature: str) -> str:
        digest = sha1(signature.encode("utf-8")).hexdigest()[:12]
        return f"{prefix}_{digest}"
