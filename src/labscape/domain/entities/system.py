"""
System Entity Module
"""
import ipaddress
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence

from pydantic import Field, PrivateAttr, field_validator

from .base import Entity, ValueObject
from .network import Network, NetworkType
from ...core.exceptions import (
    CapacityExhaustedError,
    LabscapeException,
    MalformedInputError,
    UnresolvedReferenceError,
    WiringStateError,
)
from ...core.unified_logger import get_logger


logger = get_logger(__name__, "system")


class WiringStatus(str, Enum):
    """Wiring lifecycle of a system"""
    UNWIRED = "unwired"
    WIRING = "wiring"
    WIRED = "wired"
    FAILED = "failed"


class NetworkInterface(ValueObject):
    """One declared network reference of a system after wiring"""

    network_name: str
    network_type: NetworkType
    address: Optional[ipaddress.IPv4Address] = None


class System(Entity):
    """
    System Entity
    A host built from a base box and attached to networks by name
    """

    name: str = Field(..., description="System unique identifier")
    base_box: str = Field(..., description="Base image reference")
    network_names: List[str] = Field(default_factory=list, description="Declared network references, in order")

    _status: WiringStatus = PrivateAttr(default=WiringStatus.UNWIRED)
    _networks: List[Network] = PrivateAttr(default_factory=list)
    _leases: Dict[str, List[ipaddress.IPv4Address]] = PrivateAttr(default_factory=dict)
    _interfaces: List[NetworkInterface] = PrivateAttr(default_factory=list)

    @field_validator('name', 'base_box')
    @classmethod
    def validate_not_empty(cls, v):
        """Validate name and base box are not blank"""
        if len(v.strip()) == 0:
            raise ValueError("Value cannot be empty")
        return v

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> 'System':
        """
        Build an unwired system from one entry of the ``systems`` array.

        Raises:
            MalformedInputError: missing or wrongly typed field
        """
        if not isinstance(config, Mapping):
            raise MalformedInputError(
                "Could not read system from configuration: expected a table",
                operation="parse_system"
            )

        name = config.get('name')
        if name is None:
            raise MalformedInputError(
                "Could not read name of system from configuration",
                operation="parse_system", field="name"
            )
        if not isinstance(name, str) or not name.strip():
            raise MalformedInputError(
                "Could not read name of system as a string",
                operation="parse_system", field="name"
            )

        base_box = config.get('base_box')
        if base_box is None:
            raise MalformedInputError(
                f'Could not read base_box of system "{name}" from configuration',
                operation="parse_system", system=name, field="base_box"
            )
        if not isinstance(base_box, str) or not base_box.strip():
            raise MalformedInputError(
                f'Could not read base_box of system "{name}" as a string',
                operation="parse_system", system=name, field="base_box"
            )

        networks = config.get('networks')
        if networks is None:
            raise MalformedInputError(
                f'Could not read networks of system "{name}" from configuration',
                operation="parse_system", system=name, field="networks"
            )
        if not isinstance(networks, (list, tuple)):
            raise MalformedInputError(
                f'Could not read networks of system "{name}" as an array',
                operation="parse_system", system=name, field="networks"
            )
        for entry in networks:
            if not isinstance(entry, str):
                raise MalformedInputError(
                    f'Could not read network reference {entry!r} of system "{name}" as a string',
                    operation="parse_system", system=name, field="networks"
                )

        return cls(name=name, base_box=base_box, network_names=list(networks))

    @property
    def status(self) -> WiringStatus:
        return self._status

    @property
    def is_wired(self) -> bool:
        return self._status == WiringStatus.WIRED

    @property
    def networks(self) -> List[Network]:
        """Resolved networks in declared order (empty until wired)"""
        return list(self._networks)

    @property
    def leased_network_addresses(self) -> Dict[str, List[ipaddress.IPv4Address]]:
        """Network name -> addresses leased on it, in declared reference order"""
        return {name: list(addresses) for name, addresses in self._leases.items()}

    @property
    def interfaces(self) -> List[NetworkInterface]:
        return list(self._interfaces)

    def wire(self, all_networks: Sequence[Network]) -> None:
        """
        Resolve network references and lease one address per Internal reference.

        Args:
            all_networks: every network of the owning scenario

        Raises:
            WiringStateError: the system was already wired (or failed)
            UnresolvedReferenceError: a referenced network does not exist
            CapacityExhaustedError: a referenced network has no free address
        """
        if self._status != WiringStatus.UNWIRED:
            raise WiringStateError(
                f'System "{self.name}" cannot be wired: it is already {self._status.value}',
                operation="wire_system", system=self.name
            )

        self._status = WiringStatus.WIRING
        logger.debug(f"Wiring system {self.name} to {self.network_names}")

        try:
            for network_name in self.network_names:
                network = self._resolve(network_name, all_networks)
                self._networks.append(network)

                if network.network_type == NetworkType.PUBLIC:
                    self._interfaces.append(NetworkInterface(
                        network_name=network.name,
                        network_type=network.network_type
                    ))
                    continue

                address = self._lease_from(network)
                self._leases.setdefault(network.name, []).append(address)
                self._interfaces.append(NetworkInterface(
                    network_name=network.name,
                    network_type=network.network_type,
                    address=address
                ))
        except LabscapeException:
            self._status = WiringStatus.FAILED
            self._networks.clear()
            self._leases.clear()
            self._interfaces.clear()
            raise

        self._status = WiringStatus.WIRED
        logger.info(f"Wired system {self.name}", leases={
            name: [str(a) for a in addresses] for name, addresses in self._leases.items()
        })

    def _resolve(self, network_name: str, all_networks: Sequence[Network]) -> Network:
        for network in all_networks:
            if network.name == network_name:
                return network
        raise UnresolvedReferenceError(
            f'System "{self.name}" is configured to use network "{network_name}" '
            f'but no network with that name could be found',
            operation="wire_system", system=self.name, network=network_name
        )

    def _lease_from(self, network: Network) -> ipaddress.IPv4Address:
        try:
            return network.lease_address()
        except CapacityExhaustedError as e:
            raise CapacityExhaustedError(
                f'System "{self.name}" could not lease an address on network "{network.name}": '
                f'the network is at capacity ({network.capacity} usable addresses, all leased)',
                operation="wire_system", system=self.name, network=network.name
            ) from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert system to dictionary representation"""
        return {
            'name': self.name,
            'base_box': self.base_box,
            'networks': list(self.network_names),
            'status': self._status.value,
            'leases': {name: [str(a) for a in addresses] for name, addresses in self._leases.items()},
        }

    def __str__(self) -> str:
        return (f"System(name={self.name}, base_box={self.base_box}, "
                f"networks={self.network_names}, status={self._status.value})")
