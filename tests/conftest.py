import pytest

from k6builder.services.install.install_config import K6InstallConfig


@pytest.fixture
def install_config(tmp_path):
    """Install config pointing at a scratch directory."""
    return K6InstallConfig(install_dir=tmp_path / "install")
