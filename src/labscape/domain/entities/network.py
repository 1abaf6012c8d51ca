"""
Network Entity Module

A network is either Public (bridged, no addressing) or Internal (a private
IPv4 subnet whose usable host addresses are leased to systems one at a time).
"""
import ipaddress
import threading
from enum import Enum
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from pydantic import Field, PrivateAttr, model_validator

from .base import Entity
from ...core.exceptions import (
    CapacityExhaustedError,
    InvalidTopologyError,
    MalformedInputError,
)
from ...core.unified_logger import get_logger


logger = get_logger(__name__, "network")

PRIVATE_RANGES: Tuple[ipaddress.IPv4Network, ...] = (
    ipaddress.IPv4Network("10.0.0.0/8"),
    ipaddress.IPv4Network("172.16.0.0/12"),
    ipaddress.IPv4Network("192.168.0.0/16"),
)

# Anything longer than /30 leaves fewer than two usable hosts
MAX_PREFIX_LENGTH = 30


class NetworkType(str, Enum):
    """Network type"""
    PUBLIC = "Public"
    INTERNAL = "Internal"


class Network(Entity):
    """
    Network Entity
    Owns subnet validation and the lease bookkeeping for its address pool
    """

    name: str = Field(..., description="Network unique identifier")
    network_type: NetworkType = Field(..., description="Public or Internal")
    subnet: Optional[ipaddress.IPv4Network] = Field(default=None, description="Private CIDR range (Internal only)")

    # Leased addresses in lease order; dict keys keep insertion order
    _leased: Dict[ipaddress.IPv4Address, None] = PrivateAttr(default_factory=dict)
    _cursor: int = PrivateAttr(default=0)
    _lock: Any = PrivateAttr(default_factory=threading.Lock)

    @model_validator(mode='after')
    def validate_topology(self):
        """Validate subnet rules for the network type"""
        self._check_topology()
        return self

    def _check_topology(self) -> None:
        if self.network_type == NetworkType.PUBLIC:
            if self.subnet is not None:
                raise InvalidTopologyError(
                    f'Network "{self.name}" is of type Public and must not define a subnet',
                    operation="validate_network", network=self.name, field="subnet"
                )
            return

        if self.subnet is None:
            raise MalformedInputError(
                f'Network "{self.name}" is of type Internal but has no subnet',
                operation="validate_network", network=self.name, field="subnet"
            )

        if self.subnet.prefixlen > MAX_PREFIX_LENGTH:
            raise InvalidTopologyError(
                f'Subnet {self.subnet} of network "{self.name}" is too small: '
                f'the prefix length must be /{MAX_PREFIX_LENGTH} or shorter '
                f'to leave room for at least 2 usable host addresses',
                operation="validate_network", network=self.name, field="subnet"
            )

        if not any(self.subnet.subnet_of(private) for private in PRIVATE_RANGES):
            ranges = ", ".join(str(r) for r in PRIVATE_RANGES)
            raise InvalidTopologyError(
                f'Subnet {self.subnet} of network "{self.name}" is not RFC 1918 compliant: '
                f'it must be fully contained in one of {ranges}',
                operation="validate_network", network=self.name, field="subnet"
            )

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> 'Network':
        """
        Build a validated network from one entry of the ``networks`` array.

        Checks run in a fixed order so the first reported problem is stable:
        name, type, subnet shape, subnet size, private-range containment, and
        finally that Public networks carry no subnet key.

        Raises:
            MalformedInputError: missing or wrongly typed field
            InvalidTopologyError: subnet rules violated
        """
        if not isinstance(config, Mapping):
            raise MalformedInputError(
                "Could not read network from configuration: expected a table",
                operation="parse_network"
            )

        name = config.get('name')
        if name is None:
            raise MalformedInputError(
                "Could not read name of network from configuration",
                operation="parse_network", field="name"
            )
        if not isinstance(name, str):
            raise MalformedInputError(
                "Could not read name of network as a string",
                operation="parse_network", field="name"
            )

        type_value = config.get('type')
        if type_value is None:
            raise MalformedInputError(
                f'Could not read type of network "{name}" from configuration',
                operation="parse_network", network=name, field="type"
            )
        if not isinstance(type_value, str):
            raise MalformedInputError(
                f'Could not read type of network "{name}" as a string',
                operation="parse_network", network=name, field="type"
            )
        try:
            network_type = NetworkType(type_value)
        except ValueError:
            valid = ", ".join(t.value for t in NetworkType)
            raise MalformedInputError(
                f'Network "{name}" has unknown type "{type_value}". Valid types: {valid}',
                operation="parse_network", network=name, field="type"
            )

        subnet = None
        if network_type == NetworkType.INTERNAL:
            subnet = cls._parse_subnet(name, config.get('subnet'))
        elif 'subnet' in config:
            raise InvalidTopologyError(
                f'Network "{name}" is of type Public and must not define a subnet',
                operation="parse_network", network=name, field="subnet"
            )

        network = cls(name=name, network_type=network_type, subnet=subnet)
        logger.debug(f"Parsed network {network}")
        return network

    @staticmethod
    def _parse_subnet(name: str, value: Any) -> ipaddress.IPv4Network:
        if value is None:
            raise MalformedInputError(
                f'Could not read subnet of network "{name}" from configuration',
                operation="parse_network", network=name, field="subnet"
            )
        if not isinstance(value, str):
            raise MalformedInputError(
                f'Could not read subnet of network "{name}" as a string',
                operation="parse_network", network=name, field="subnet"
            )
        if '/' not in value:
            raise MalformedInputError(
                f'Could not parse subnet "{value}" of network "{name}" as a CIDR range',
                operation="parse_network", network=name, field="subnet"
            )
        try:
            # Host bits may be set (e.g. 192.168.0.1/24); normalise to the network
            return ipaddress.IPv4Network(value.strip(), strict=False)
        except ValueError:
            raise MalformedInputError(
                f'Could not parse subnet "{value}" of network "{name}" as a CIDR range',
                operation="parse_network", network=name, field="subnet"
            )

    @property
    def is_internal(self) -> bool:
        return self.network_type == NetworkType.INTERNAL

    @property
    def capacity(self) -> int:
        """Number of usable host addresses (0 for Public networks)"""
        if not self.is_internal:
            return 0
        return self.subnet.num_addresses - 2

    @property
    def leased_addresses(self) -> Tuple[ipaddress.IPv4Address, ...]:
        return tuple(self._leased)

    @property
    def available_count(self) -> int:
        return self.capacity - len(self._leased)

    def usable_hosts(self) -> Iterator[ipaddress.IPv4Address]:
        """Usable host addresses in ascending order, produced lazily"""
        if not self.is_internal:
            return iter(())
        return self.subnet.hosts()

    def lease_address(self) -> Optional[ipaddress.IPv4Address]:
        """
        Lease the lowest unused host address.

        Returns:
            The leased address, or None for Public networks

        Raises:
            CapacityExhaustedError: every usable address is already leased
        """
        if not self.is_internal:
            return None

        with self._lock:
            first_host = int(self.subnet.network_address) + 1
            for offset in range(self._cursor, self.capacity):
                candidate = ipaddress.IPv4Address(first_host + offset)
                if candidate not in self._leased:
                    self._leased[candidate] = None
                    self._cursor = offset + 1
                    logger.debug(f"Leased {candidate} on network {self.name}")
                    return candidate

        raise CapacityExhaustedError(
            f'No address available on network "{self.name}": all {self.capacity} '
            f'usable addresses of {self.subnet} are already leased',
            operation="lease_address", network=self.name
        )

    def validate(self) -> None:
        """Re-check every invariant without modifying the network"""
        self._check_topology()

        if not self.is_internal:
            return

        for address in self._leased:
            if address not in self.subnet or address in (self.subnet.network_address,
                                                         self.subnet.broadcast_address):
                raise InvalidTopologyError(
                    f'Address {address} leased on network "{self.name}" is not a usable host of {self.subnet}',
                    operation="validate_network", network=self.name
                )

    def to_dict(self) -> Dict[str, Any]:
        """Convert network to dictionary representation"""
        return {
            'name': self.name,
            'type': self.network_type.value,
            'subnet': str(self.subnet) if self.subnet else None,
            'capacity': self.capacity,
            'leased': [str(a) for a in self._leased],
        }

    def __str__(self) -> str:
        if self.is_internal:
            return f"Network(name={self.name}, type={self.network_type.value}, subnet={self.subnet})"
        return f"Network(name={self.name}, type={self.network_type.value})"
