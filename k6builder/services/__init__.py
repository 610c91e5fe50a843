from k6builder.services.install import K6InstallConfig, get_k6_binary_path, install_binary
from k6builder.services.testing import K6TestBuilder

__all__ = [
    "K6InstallConfig",
    "get_k6_binary_path",
    "install_binary",
    "K6TestBuilder",
]
