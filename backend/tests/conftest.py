"""Test fixtures: temporary hosts file and FastAPI test client."""

import json

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from wakeup.main import create_app
from wakeup.services import get_config_source
from wakeup.services.registry import DirectoryConfigSource

HOSTS = {
    "hosts": [
        {"name": "desktop", "mac_addresses": ["00:11:22:33:44:55"], "ip_address": "192.168.1.20"},
        {"name": "nas", "mac_addresses": ["AA:BB:CC:DD:EE:01", "aa:bb:cc:dd:ee:02"]},
        {"name": "broken", "mac_addresses": ["aa:bb:cc:dd:ee:ff:gg"]},
    ]
}


def write_hosts(config_dir, data) -> None:
    path = config_dir / "hosts.json"
    path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")


@pytest.fixture
def config_dir(tmp_path):
    """Config directory holding the default hosts.json."""
    write_hosts(tmp_path, HOSTS)
    return tmp_path


@pytest.fixture
def source(config_dir):
    return DirectoryConfigSource(config_dir)


@pytest.fixture
def missing_source(tmp_path):
    """Config source pointing at a directory without a hosts file."""
    return DirectoryConfigSource(tmp_path / "nowhere")


@pytest_asyncio.fixture
async def client(source):
    """Async test client wired to the temporary hosts file."""
    app = create_app()
    app.dependency_overrides[get_config_source] = lambda: source

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
