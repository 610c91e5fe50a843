import logging
from pathlib import Path
from typing import Optional

import httpx

from k6builder.services.install.download_service import download_file
from k6builder.services.install.extract_service import extract_file
from k6builder.services.install.install_config import K6InstallConfig
from k6builder.utils.platform_detector import detect_platform

logger = logging.getLogger(__name__)

# 플랫폼별 릴리즈 아카이브
PLATFORM_ARCHIVES = {
    "windows": "windows-amd64.zip",
    "macos": "darwin-amd64.zip",
    "linux": "linux-amd64.tar.gz",
}


def get_archive_extension(target_platform: str) -> str:
    return "zip" if target_platform in ("windows", "macos") else "tar.gz"


async def install_binary(
    config: Optional[K6InstallConfig] = None,
    client: Optional[httpx.AsyncClient] = None
) -> Path:
    """
    k6 바이너리를 다운로드하고 설치 디렉터리에 배치

    Args:
        config: 설치 설정 (기본값: settings 기반)
        client: 다운로드에 사용할 httpx.AsyncClient

    Returns:
        Path: 설치된 k6 실행 파일 경로
    """
    config = config or K6InstallConfig.from_settings()
    target_platform = detect_platform()

    install_dir = Path(config.install_dir)
    extract_dir = install_dir / f"k6-{target_platform}-extract"
    archive_path = install_dir / f"k6.{get_archive_extension(target_platform)}"
    url = config.download_url(PLATFORM_ARCHIVES[target_platform])

    logger.info(f"Downloading k6 v{config.version} for {target_platform}...")
    downloaded_path = await download_file(url, archive_path, client=client, timeout_seconds=config.timeout_seconds)

    binary_path = extract_file(downloaded_path, extract_dir, target_platform)

    logger.info(f"k6 successfully installed at: {binary_path}")
    return binary_path
