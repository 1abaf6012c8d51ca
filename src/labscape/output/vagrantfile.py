"""
Vagrantfile Emitter

Renders a wired scenario into a Vagrantfile. Systems appear in scenario order
and network lines in each system's declared reference order, so the same
wired scenario always produces the same bytes.
"""
import re
from typing import Optional

from .indentation_builder import IndentationAwareStringBuilder, IndentationType, DEFAULT_TAB_SIZE
from ..core.exceptions import WiringStateError
from ..core.unified_logger import get_logger
from ..domain.entities import NetworkType, Scenario, System, WiringStatus


logger = get_logger(__name__, "vagrantfile")


def ruby_string(value: str) -> str:
    """Double-quoted Ruby string literal"""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("#{", "\\#{")
    return f'"{escaped}"'


def block_variable(system_name: str) -> str:
    """Ruby block variable for a system: case-folded, non-identifier chars -> '_'"""
    variable = re.sub(r'[^0-9a-z_]', '_', system_name.casefold())
    if not variable or variable[0].isdigit():
        variable = f"_{variable}"
    return variable


class VagrantfileEmitter:
    """Turns a wired scenario into Vagrantfile text"""

    def __init__(self, indentation_type: IndentationType = IndentationType.SPACES,
                 tab_size: Optional[int] = DEFAULT_TAB_SIZE):
        self.indentation_type = IndentationType(indentation_type)
        self.tab_size = tab_size

    def _new_builder(self) -> IndentationAwareStringBuilder:
        builder = IndentationAwareStringBuilder().with_indentation_type(self.indentation_type)
        if self.indentation_type == IndentationType.SPACES and self.tab_size is not None:
            builder.with_tab_size(self.tab_size)
        return builder

    def render(self, scenario: Scenario) -> str:
        """
        Render the scenario.

        Raises:
            WiringStateError: a system has not been wired successfully
        """
        for system in scenario.systems:
            if system.status != WiringStatus.WIRED:
                raise WiringStateError(
                    f'Cannot render scenario "{scenario.name}": system "{system.name}" '
                    f'is {system.status.value}, not wired',
                    operation="render_vagrantfile", system=system.name
                )

        builder = self._new_builder()
        builder.add('Vagrant.configure("2") do |config|')
        builder.increase_indentation()

        for system in scenario.systems:
            self._render_system(builder, system)

        builder.decrease_indentation()
        builder.add("end")

        output = builder.build_string()
        logger.info(f"Rendered Vagrantfile for scenario {scenario.name} "
                    f"({len(scenario.systems)} systems)")
        return output

    def _render_system(self, builder: IndentationAwareStringBuilder, system: System) -> None:
        var = block_variable(system.name)

        builder.add(f"config.vm.define {ruby_string(system.name)} do |{var}|")
        builder.increase_indentation()

        builder.add(f"{var}.vm.box = {ruby_string(system.base_box)}")

        for interface in system.interfaces:
            if interface.network_type == NetworkType.INTERNAL:
                builder.add(
                    f'{var}.vm.network "private_network", ip: {ruby_string(str(interface.address))}, '
                    f'virtualbox__intnet: {ruby_string(interface.network_name)}'
                )
            else:
                builder.add(f'{var}.vm.network "public_network"')

        builder.decrease_indentation()
        builder.add("end")


def render_vagrantfile(scenario: Scenario, indentation_type: IndentationType = IndentationType.SPACES,
                       tab_size: Optional[int] = DEFAULT_TAB_SIZE) -> str:
    """Convenience wrapper around VagrantfileEmitter"""
    return VagrantfileEmitter(indentation_type, tab_size).render(scenario)
