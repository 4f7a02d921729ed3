"""
Base classes for the protocol graph.

A protocol is a data-driven definition of the resuscitation algorithm:
a fixed set of nodes (steps), each carrying its guidance text and the
labeled transitions the user may take from it. The graph is plain data
and is validated once when it is built; the step engine is generic over it.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Tuple

from neoresus.core.enums import NodeId, SideEffect
from neoresus.core.errors import UnknownNodeError


@dataclass(frozen=True)
class Transition:
    """
    A labeled, user-triggered move out of one node.

    Attributes:
        label: Stable action key passed to StepEngine.advance (e.g. "birth-occurs")
        target: Node the transition leads to
        caption: Button text shown to the user
        primary: Highlight the button (presentation only)
        side_effect: Optional extra action (start timer / full reset)
    """
    label: str
    target: NodeId
    caption: str = ""
    primary: bool = False
    side_effect: Optional[SideEffect] = None


@dataclass(frozen=True)
class ProtocolNode:
    """
    A single protocol step.

    Attributes:
        id: Node identifier from the closed NodeId set
        title: Display title for the step
        description: One-line summary of the step's purpose
        details: Ordered guidance items
        warning: Optional caution banner text
        transitions: Outgoing transitions, in display order
    """
    id: NodeId
    title: str
    description: str
    details: Tuple[str, ...] = ()
    warning: Optional[str] = None
    transitions: Tuple[Transition, ...] = field(default_factory=tuple)

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(t.label for t in self.transitions)


def _coerce_node_id(node_id) -> NodeId:
    """Accept NodeId members or their string values."""
    if isinstance(node_id, NodeId):
        return node_id
    try:
        return NodeId(node_id)
    except ValueError:
        raise UnknownNodeError(node_id) from None


class ProtocolGraph:
    """
    Closed directed graph of protocol nodes.

    Cycles are expected (PPV <-> MRSOPA, COMPRESS <-> MEDS); dead ends and
    dangling targets are not.
    """

    def __init__(self, nodes: Iterable[ProtocolNode], initial: NodeId = NodeId.PREP, name: str = ""):
        self.name = name
        self.initial = initial
        self._nodes: Dict[NodeId, ProtocolNode] = {}
        for node in nodes:
            if node.id in self._nodes:
                raise ValueError(f"Duplicate definition for node {node.id.value}")
            self._nodes[node.id] = node
        self.validate()

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id) -> bool:
        return node_id in self._nodes

    def __iter__(self):
        return iter(self._nodes.values())

    @property
    def node_ids(self) -> Tuple[NodeId, ...]:
        return tuple(self._nodes)

    def node_definition(self, node_id) -> ProtocolNode:
        """Return the node record, or raise UnknownNodeError."""
        key = _coerce_node_id(node_id)
        try:
            return self._nodes[key]
        except KeyError:
            raise UnknownNodeError(node_id) from None

    def transitions_for(self, node_id) -> Tuple[Transition, ...]:
        """Outgoing transitions of a node, in declaration order."""
        return self.node_definition(node_id).transitions

    def find_transition(self, node_id, label: str) -> Optional[Transition]:
        for transition in self.transitions_for(node_id):
            if transition.label == label:
                return transition
        return None

    def validate(self):
        """
        Check the graph is closed and complete.

        Raises UnknownNodeError for a missing node or dangling target and
        ValueError for dead ends or duplicate labels.
        """
        for node_id in NodeId:
            if node_id not in self._nodes:
                raise UnknownNodeError(node_id.value)
        if self.initial not in self._nodes:
            raise UnknownNodeError(self.initial)

        for node in self._nodes.values():
            if not node.transitions:
                raise ValueError(f"Node {node.id.value} has no outgoing transitions")
            labels = node.labels
            if len(set(labels)) != len(labels):
                raise ValueError(f"Node {node.id.value} declares duplicate transition labels")
            for transition in node.transitions:
                if transition.target not in self._nodes:
                    raise UnknownNodeError(transition.target)
