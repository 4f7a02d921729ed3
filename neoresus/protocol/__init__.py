# Protocol package
from .graph import ProtocolGraph, ProtocolNode, Transition
from .nrp import create_nrp_protocol

__all__ = [
    'ProtocolGraph',
    'ProtocolNode',
    'Transition',
    'create_nrp_protocol',
    'PROTOCOL_BUILDERS',
]

PROTOCOL_BUILDERS = {
    "nrp": create_nrp_protocol,
}
