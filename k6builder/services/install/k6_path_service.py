"""
k6 바이너리 경로 결정 모듈

우선순위:
1. 현재 작업 디렉터리의 .k6path 파일에 적힌 경로
2. 설치 디렉터리에 이미 설치된 k6
3. 새로 다운로드하여 설치
"""
import logging
from pathlib import Path
from typing import Optional

import httpx

from k6builder.common.exception.k6_exception import K6Exception
from k6builder.common.response.code import FailureCode
from k6builder.services.install.install_config import K6InstallConfig
from k6builder.services.install.installer import install_binary
from k6builder.utils.platform_detector import detect_platform, get_binary_name

logger = logging.getLogger(__name__)


def read_override_path(config: K6InstallConfig, cwd: Optional[Path] = None) -> Optional[Path]:
    """
    .k6path 파일에 지정된 바이너리 경로 조회

    Returns:
        Optional[Path]: 지정된 경로 (파일이 없으면 None)

    Raises:
        K6Exception: 지정된 경로에 파일이 없을 때 (OVERRIDE_PATH_INVALID)
    """
    path_file = (cwd or Path.cwd()) / config.path_file
    if not path_file.exists():
        return None

    try:
        custom_text = path_file.read_text(encoding="utf-8").strip()
    except OSError as e:
        raise K6Exception(
            FailureCode.OVERRIDE_PATH_INVALID,
            f"Error reading {config.path_file} file: {str(e)}",
        ) from e

    # 빈 파일은 Path("") == Path(".") 가 되어 항상 존재하므로 따로 막는다
    if not custom_text:
        raise K6Exception(
            FailureCode.OVERRIDE_PATH_INVALID,
            f"{config.path_file} is empty: {path_file}",
        )

    custom_path = Path(custom_text)
    if not custom_path.exists():
        raise K6Exception(
            FailureCode.OVERRIDE_PATH_INVALID,
            f"k6 binary not found at custom path specified in {config.path_file}: {custom_path}",
        )
    return custom_path


def get_installed_binary_path(config: K6InstallConfig) -> Path:
    return Path(config.install_dir) / get_binary_name(detect_platform())


async def get_k6_binary_path(
    config: Optional[K6InstallConfig] = None,
    client: Optional[httpx.AsyncClient] = None
) -> Path:
    """
    사용할 k6 실행 파일 경로 반환 (필요하면 설치)

    동시에 여러 번 호출되어도 설치를 직렬화하지 않는다.
    """
    config = config or K6InstallConfig.from_settings()

    custom_path = read_override_path(config)
    if custom_path is not None:
        logger.debug(f"Using k6 from custom path: {custom_path}")
        return custom_path

    internal_path = get_installed_binary_path(config)
    if internal_path.exists():
        logger.debug(f"Using internally installed k6: {internal_path}")
        return internal_path

    logger.info("k6 binary not found. Installing...")
    return await install_binary(config, client=client)
