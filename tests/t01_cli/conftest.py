import pytest
from typer.testing import CliRunner

from refheap.api import ConfigManager
from refheap.cli import app
from refheap.cli.app import app_state


@pytest.fixture
def cli(monkeypatch, tmp_path, transport):
    """Run the CLI against the fake service, isolated from the user's config"""
    for name in ("REFHEAP_URL", "REFHEAP_USER", "REFHEAP_TOKEN", "REFHEAP_TIMEOUT", "REFHEAP_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(ConfigManager, "DEFAULT_CONFIG_PATH", tmp_path / "config.toml")
    monkeypatch.setattr(app_state, "transport", transport)
    runner = CliRunner()

    def invoke(*args, **kwargs):
        return runner.invoke(app, ["--url", "https://refheap.test/api", *args], **kwargs)

    return invoke
