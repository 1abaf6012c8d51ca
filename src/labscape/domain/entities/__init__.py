"""Domain Entity Module"""

from .network import Network, NetworkType, PRIVATE_RANGES
from .system import System, NetworkInterface, WiringStatus
from .scenario import Scenario

__all__ = [
    'Network',
    'NetworkType',
    'PRIVATE_RANGES',
    'System',
    'NetworkInterface',
    'WiringStatus',
    'Scenario'
]
