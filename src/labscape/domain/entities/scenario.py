"""
Scenario Aggregate Module

A scenario owns every network and system of one lab topology. Systems only
hold references to networks owned here; wiring is a separate explicit step so
an unwired model can be inspected first.
"""
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import Field

from .base import Entity
from .network import Network
from .system import System, WiringStatus
from ...core.exceptions import (
    MalformedInputError,
    UniquenessViolationError,
)
from ...core.unified_logger import get_logger


logger = get_logger(__name__, "scenario")


def _first_duplicate(names: Iterable[str]) -> Optional[str]:
    """First name whose count exceeds one, in first-seen order"""
    counts: Dict[str, int] = {}
    for name in names:
        counts[name] = counts.get(name, 0) + 1
    for name, count in counts.items():
        if count > 1:
            return name
    return None


class Scenario(Entity):
    """
    Scenario Aggregate
    Ordered networks and systems for one lab environment
    """

    name: str = Field(..., description="Scenario name")
    networks: List[Network] = Field(default_factory=list, description="Networks in declared order")
    systems: List[System] = Field(default_factory=list, description="Systems in declared order")

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> 'Scenario':
        """
        Build a validated but unwired scenario from a parsed description.

        Networks are built and checked for unique names before any system is
        read. Systems are then built and checked the same way.

        Raises:
            MalformedInputError: missing or wrongly typed field
            InvalidTopologyError: a network breaks a subnet rule
            UniquenessViolationError: duplicate network or system name
        """
        scenario_table = config.get('scenario') if isinstance(config, Mapping) else None
        if not isinstance(scenario_table, Mapping):
            raise MalformedInputError(
                "Could not get scenario from configuration",
                operation="parse_scenario", field="scenario"
            )

        name = scenario_table.get('name')
        if name is None:
            raise MalformedInputError(
                "Could not read name of scenario from configuration",
                operation="parse_scenario", field="name"
            )
        if not isinstance(name, str):
            raise MalformedInputError(
                "Could not read name of scenario as a string",
                operation="parse_scenario", field="name"
            )

        networks_config = config.get('networks')
        if not isinstance(networks_config, list):
            raise MalformedInputError(
                "Could not read networks from configuration",
                operation="parse_scenario", field="networks"
            )
        networks = [Network.from_config(entry) for entry in networks_config]
        cls._check_unique_networks(networks)

        systems_config = config.get('systems')
        if not isinstance(systems_config, list):
            raise MalformedInputError(
                "Could not get systems from configuration",
                operation="parse_scenario", field="systems"
            )
        systems = [System.from_config(entry) for entry in systems_config]
        cls._check_unique_systems(systems)

        scenario = cls(name=name, networks=networks, systems=systems)
        logger.info(f"Parsed scenario {name}: {len(networks)} networks, {len(systems)} systems")
        return scenario

    @staticmethod
    def _check_unique_networks(networks: List[Network]) -> None:
        duplicate = _first_duplicate(n.name for n in networks)
        if duplicate is not None:
            raise UniquenessViolationError(
                f'Multiple networks parsed with name "{duplicate}". Network names must be unique.',
                operation="parse_scenario", network=duplicate
            )

    @staticmethod
    def _check_unique_systems(systems: List[System]) -> None:
        duplicate = _first_duplicate(s.name for s in systems)
        if duplicate is not None:
            raise UniquenessViolationError(
                f'Multiple systems parsed with name "{duplicate}". System names must be unique.',
                operation="parse_scenario", system=duplicate
            )

    def get_network(self, name: str) -> Optional[Network]:
        return next((n for n in self.networks if n.name == name), None)

    def get_system(self, name: str) -> Optional[System]:
        return next((s for s in self.systems if s.name == name), None)

    @property
    def is_wired(self) -> bool:
        return all(s.status == WiringStatus.WIRED for s in self.systems)

    def wire_networking(self) -> None:
        """Wire every system in declared order; stops at the first failure"""
        for system in self.systems:
            system.wire(self.networks)
        logger.info(f"Wired networking for scenario {self.name}")

    def validate(self) -> None:
        """Re-check every invariant without modifying the scenario"""
        self._check_unique_networks(self.networks)
        for network in self.networks:
            network.validate()
        self._check_unique_systems(self.systems)

    def summary(self) -> Dict[str, Any]:
        """Dictionary view used by the plan command"""
        return {
            'name': self.name,
            'networks': [n.to_dict() for n in self.networks],
            'systems': [s.to_dict() for s in self.systems],
        }

    def __str__(self) -> str:
        return (f"Scenario(name={self.name}, networks={len(self.networks)}, "
                f"systems={len(self.systems)})")
