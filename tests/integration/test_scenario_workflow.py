"""
End-to-end scenario workflow: description file -> wired model -> Vagrantfile
"""
from pathlib import Path

import pytest
from click.testing import CliRunner

from labscape.cli.main import cli
from labscape.services import ScenarioService


FIXTURES = Path(__file__).parent.parent / "fixtures"

pytestmark = pytest.mark.integration


class TestScenarioWorkflow:

    @pytest.mark.parametrize("description", ["office_lab.toml", "office_lab.yml"])
    def test_build_matches_expected(self, description, temp_dir):
        output = temp_dir / "Vagrantfile"

        ScenarioService().build(FIXTURES / description, output)

        assert output.read_text() == (FIXTURES / "office_lab.Vagrantfile").read_text()

    def test_toml_and_yaml_agree(self):
        service = ScenarioService()

        from_toml = service.build(FIXTURES / "office_lab.toml")
        from_yaml = service.build(FIXTURES / "office_lab.yml")

        assert from_toml.content == from_yaml.content
        assert from_toml.scenario.summary() == from_yaml.scenario.summary()

    def test_leases_are_unique_per_network(self):
        scenario = ScenarioService().build(FIXTURES / "office_lab.toml").scenario

        for network in scenario.networks:
            leased = network.leased_addresses
            assert len(leased) == len(set(leased))
            assert len(leased) <= network.capacity

        servers = scenario.get_network("Servers")
        assert servers.available_count == 0

    def test_cli_build(self, temp_dir):
        output = temp_dir / "Vagrantfile"

        result = CliRunner().invoke(cli, ['build', str(FIXTURES / "office_lab.yml"), '-o', str(output)])

        assert result.exit_code == 0
        assert output.read_text() == (FIXTURES / "office_lab.Vagrantfile").read_text()

    def test_cli_plan_then_build(self, temp_dir, flat):
        runner = CliRunner()
        description = str(FIXTURES / "office_lab.toml")

        plan = runner.invoke(cli, ['plan', '--wire', description])
        assert plan.exit_code == 0
        assert "172.16.5.2" in flat(plan.output)

        build = runner.invoke(cli, ['build', '--stdout', description])
        assert build.exit_code == 0
        assert build.output.startswith('Vagrant.configure("2") do |config|')

    def test_extra_system_exhausts_servers_network(self, temp_dir):
        description = temp_dir / "overfull.toml"
        description.write_text(
            (FIXTURES / "office_lab.toml").read_text()
            + '\n[[systems]]\nname = "Backup"\nbase_box = "generic/debian12"\nnetworks = ["Servers"]\n'
        )
        output = temp_dir / "Vagrantfile"

        result = CliRunner().invoke(cli, ['build', str(description), '-o', str(output)])

        assert result.exit_code == 1
        assert not output.exists()
