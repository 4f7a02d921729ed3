"""
Exception types raised by the resuscitation core.

Every rejection is reported to the caller; none of these is fatal to the
process. The worst case is "command rejected, state unchanged".
"""


class NeoResusError(Exception):
    """Base class for all core errors."""


class UnknownNodeError(NeoResusError, KeyError):
    """A node id outside the closed protocol set (corrupt graph data)."""

    def __init__(self, node_id):
        self.node_id = node_id
        super().__init__(f"Unknown protocol node: {node_id!r}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class InvalidTransitionError(NeoResusError, ValueError):
    """The requested action label is not available from the current node."""

    def __init__(self, node_id, label: str, available=()):
        self.node_id = node_id
        self.label = label
        self.available = tuple(available)
        node_name = getattr(node_id, "value", node_id)
        options = ", ".join(self.available) or "none"
        super().__init__(
            f"Action {label!r} is not available from {node_name} (available: {options})"
        )


class InvalidParameterError(NeoResusError, ValueError):
    """A patient parameter is non-numeric or non-positive."""

    def __init__(self, name: str, value):
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name}: {value!r} (expected a positive number)")
