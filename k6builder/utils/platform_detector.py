import logging
import platform
from typing import Optional

from k6builder.common.exception.k6_exception import K6Exception
from k6builder.common.response.code import FailureCode

logger = logging.getLogger(__name__)

SUPPORTED_PLATFORMS = {
    "Windows": "windows",
    "Darwin": "macos",
    "Linux": "linux",
}


def detect_platform(system_name: Optional[str] = None) -> str:
    """
    현재 운영체제를 windows / macos / linux 중 하나로 변환

    Args:
        system_name: platform.system() 값 (테스트용, 기본값: 현재 시스템)

    Returns:
        str: 플랫폼 식별자

    Raises:
        K6Exception: 지원하지 않는 운영체제일 때 (UNSUPPORTED_PLATFORM)
    """
    system_name = system_name if system_name is not None else platform.system()
    detected = SUPPORTED_PLATFORMS.get(system_name)
    if detected is None:
        raise K6Exception(
            FailureCode.UNSUPPORTED_PLATFORM,
            f'The current system "{system_name}" is not supported',
        )
    return detected


def get_binary_name(target_platform: str) -> str:
    return "k6.exe" if target_platform == "windows" else "k6"
