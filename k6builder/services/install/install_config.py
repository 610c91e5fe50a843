from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass
class K6InstallConfig:
    """k6 설치 설정"""
    version: str = "1.4.0"
    download_host: str = "github.com"
    download_org: str = "grafana"
    download_project: str = "k6"
    install_dir: Union[str, Path] = "k6"
    path_file: str = ".k6path"
    timeout_seconds: int = 30

    def __post_init__(self):
        self.install_dir = Path(self.install_dir)

    @classmethod
    def from_settings(cls):
        """settings에서 설정값을 가져와서 K6InstallConfig 생성"""
        from k6builder.core.config import settings
        install_config = settings.get_install_config()
        return cls(
            version=install_config['version'],
            download_host=install_config['download_host'],
            download_org=install_config['download_org'],
            download_project=install_config['download_project'],
            install_dir=install_config['install_dir'],
            path_file=install_config['path_file'],
            timeout_seconds=install_config['timeout_seconds']
        )

    def download_url(self, archive_suffix: str) -> str:
        """
        릴리즈 아카이브 URL 생성

        예: https://github.com/grafana/k6/releases/download/v1.4.0/k6-v1.4.0-linux-amd64.tar.gz
        """
        return (
            f"https://{self.download_host}/{self.download_org}/{self.download_project}"
            f"/releases/download/v{self.version}"
            f"/{self.download_project}-v{self.version}-{archive_suffix}"
        )
