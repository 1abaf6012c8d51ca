"""
pytest fixtures
"""
import pytest
import tempfile
import yaml
from pathlib import Path

from labscape.core.unified_logger import LoggerFactory


SIMPLE_SCENARIO_TOML = """\
[scenario]
name = "Simple"

[[networks]]
name = "LAN"
type = "Internal"
subnet = "192.168.56.0/24"

[[networks]]
name = "WAN"
type = "Public"

[[systems]]
name = "Desktop"
base_box = "ubuntu/focal64"
networks = ["LAN"]

[[systems]]
name = "Server"
base_box = "ubuntu/focal64"
networks = ["LAN", "WAN"]
"""

SIMPLE_SCENARIO_VAGRANTFILE = """\
Vagrant.configure("2") do |config|
    config.vm.define "Desktop" do |desktop|
        desktop.vm.box = "ubuntu/focal64"
        desktop.vm.network "private_network", ip: "192.168.56.1", virtualbox__intnet: "LAN"
    end
    config.vm.define "Server" do |server|
        server.vm.box = "ubuntu/focal64"
        server.vm.network "private_network", ip: "192.168.56.2", virtualbox__intnet: "LAN"
        server.vm.network "public_network"
    end
end"""


def flatten(text: str) -> str:
    """Collapse whitespace so rich line wrapping does not split assertions"""
    return " ".join(text.split())


@pytest.fixture(autouse=True)
def reset_logging():
    """Give every test fresh loggers bound to the current stderr"""
    yield
    LoggerFactory.configure()


@pytest.fixture
def temp_dir():
    """Temporary directory fixture"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_scenario_config():
    """Parsed form of the simple Desktop/Server scenario"""
    return {
        'scenario': {'name': 'Simple'},
        'networks': [
            {'name': 'LAN', 'type': 'Internal', 'subnet': '192.168.56.0/24'},
            {'name': 'WAN', 'type': 'Public'},
        ],
        'systems': [
            {'name': 'Desktop', 'base_box': 'ubuntu/focal64', 'networks': ['LAN']},
            {'name': 'Server', 'base_box': 'ubuntu/focal64', 'networks': ['LAN', 'WAN']},
        ],
    }


@pytest.fixture
def expected_vagrantfile():
    return SIMPLE_SCENARIO_VAGRANTFILE


@pytest.fixture
def toml_scenario_file(temp_dir):
    """Simple scenario written as TOML"""
    path = temp_dir / "simple.toml"
    path.write_text(SIMPLE_SCENARIO_TOML, encoding='utf-8')
    return path


@pytest.fixture
def yaml_scenario_file(temp_dir, sample_scenario_config):
    """Simple scenario written as YAML"""
    path = temp_dir / "simple.yml"
    with open(path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(sample_scenario_config, f, sort_keys=False)
    return path


@pytest.fixture
def write_scenario(temp_dir):
    """Write an arbitrary scenario mapping as YAML and return its path"""
    def _write(config, filename="scenario.yml"):
        path = temp_dir / filename
        with open(path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(config, f, sort_keys=False)
        return path
    return _write


@pytest.fixture
def flat():
    return flatten
