from k6builder.services.install.install_config import K6InstallConfig
from k6builder.services.install.installer import install_binary
from k6builder.services.install.k6_path_service import get_k6_binary_path

__all__ = [
    "K6InstallConfig",
    "install_binary",
    "get_k6_binary_path",
]
