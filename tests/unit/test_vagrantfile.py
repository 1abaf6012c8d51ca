"""
Tests for Vagrantfile rendering
"""
import pytest

from labscape.core.exceptions import UnresolvedReferenceError, WiringStateError
from labscape.domain.entities import Scenario
from labscape.output import IndentationType, VagrantfileEmitter, render_vagrantfile
from labscape.output.vagrantfile import block_variable, ruby_string


@pytest.fixture
def wired_scenario(sample_scenario_config):
    scenario = Scenario.from_config(sample_scenario_config)
    scenario.wire_networking()
    return scenario


class TestVagrantfileEmitter:

    def test_simple_scenario(self, wired_scenario, expected_vagrantfile):
        assert render_vagrantfile(wired_scenario) == expected_vagrantfile

    def test_subnet_given_with_host_bits(self):
        scenario = Scenario.from_config({
            'scenario': {'name': 'Office'},
            'networks': [{'name': 'LAN', 'type': 'Internal', 'subnet': '192.168.0.1/24'}],
            'systems': [
                {'name': 'Desktop', 'base_box': 'box', 'networks': ['LAN']},
                {'name': 'Server', 'base_box': 'box', 'networks': ['LAN']},
            ],
        })
        scenario.wire_networking()

        output = render_vagrantfile(scenario)

        desktop = output.index('ip: "192.168.0.1", virtualbox__intnet: "LAN"')
        server = output.index('ip: "192.168.0.2", virtualbox__intnet: "LAN"')
        assert output.index('"Desktop"') < desktop < output.index('"Server"') < server

    def test_tabs(self, wired_scenario, expected_vagrantfile):
        output = VagrantfileEmitter(IndentationType.TABS).render(wired_scenario)

        assert output == expected_vagrantfile.replace("    ", "\t")

    def test_two_space_indent(self, wired_scenario):
        lines = VagrantfileEmitter(tab_size=2).render(wired_scenario).splitlines()

        assert lines[1] == '  config.vm.define "Desktop" do |desktop|'
        assert lines[2] == '    desktop.vm.box = "ubuntu/focal64"'

    def test_rendering_is_byte_stable(self, wired_scenario):
        emitter = VagrantfileEmitter()
        assert emitter.render(wired_scenario) == emitter.render(wired_scenario)

    def test_unwired_scenario_rejected(self, sample_scenario_config):
        scenario = Scenario.from_config(sample_scenario_config)

        with pytest.raises(WiringStateError):
            render_vagrantfile(scenario)

    def test_failed_scenario_rejected(self, sample_scenario_config):
        sample_scenario_config['systems'][1]['networks'] = ['Missing']
        scenario = Scenario.from_config(sample_scenario_config)
        with pytest.raises(UnresolvedReferenceError):
            scenario.wire_networking()

        with pytest.raises(WiringStateError) as exc_info:
            render_vagrantfile(scenario)
        assert '"Server"' in str(exc_info.value)

    def test_one_line_per_reference(self):
        scenario = Scenario.from_config({
            'scenario': {'name': 'Multi'},
            'networks': [
                {'name': 'LAN', 'type': 'Internal', 'subnet': '10.10.0.0/24'},
                {'name': 'WAN', 'type': 'Public'},
            ],
            'systems': [
                {'name': 'Router', 'base_box': 'generic/alpine', 'networks': ['LAN', 'WAN', 'LAN']},
            ],
        })
        scenario.wire_networking()

        lines = render_vagrantfile(scenario).splitlines()

        assert lines[3:6] == [
            '        router.vm.network "private_network", ip: "10.10.0.1", virtualbox__intnet: "LAN"',
            '        router.vm.network "public_network"',
            '        router.vm.network "private_network", ip: "10.10.0.2", virtualbox__intnet: "LAN"',
        ]

    def test_system_without_networks(self):
        scenario = Scenario.from_config({
            'scenario': {'name': 'Lonely'},
            'networks': [],
            'systems': [{'name': 'Solo', 'base_box': 'box', 'networks': []}],
        })
        scenario.wire_networking()

        assert render_vagrantfile(scenario) == (
            'Vagrant.configure("2") do |config|\n'
            '    config.vm.define "Solo" do |solo|\n'
            '        solo.vm.box = "box"\n'
            '    end\n'
            'end'
        )


class TestRubyHelpers:

    @pytest.mark.parametrize("name,expected", [
        ("Desktop", "desktop"),
        ("web-server", "web_server"),
        ("Web Server 2", "web_server_2"),
        ("2fa", "_2fa"),
    ])
    def test_block_variable(self, name, expected):
        assert block_variable(name) == expected

    def test_ruby_string_escapes(self):
        assert ruby_string('say "hi"') == '"say \\"hi\\""'
        assert ruby_string("a\\b") == '"a\\\\b"'
        assert ruby_string("#{x}") == '"\\#{x}"'
