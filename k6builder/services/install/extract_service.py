"""
k6 릴리즈 아카이브 압축 해제 모듈
"""
import logging
import os
import shutil
import tarfile
import zipfile
from pathlib import Path
from typing import Union

from k6builder.common.exception.k6_exception import K6Exception
from k6builder.common.response.code import FailureCode
from k6builder.utils.platform_detector import get_binary_name

logger = logging.getLogger(__name__)


def extract_file(archive_path: Union[str, Path], output_dir: Union[str, Path], target_platform: str) -> Path:
    """
    아카이브를 풀고 k6 실행 파일을 고정 경로로 옮긴다

    Args:
        archive_path: 다운로드된 아카이브 (.zip 또는 .tar.gz)
        output_dir: 압축 해제 작업 디렉터리
        target_platform: windows / macos / linux

    Returns:
        Path: 최종 실행 파일 경로 (output_dir 의 형제 경로, k6 또는 k6.exe)

    Raises:
        K6Exception: 압축 해제 실패 또는 실행 파일을 찾지 못했을 때 (EXTRACTION_FAILED)
    """
    archive_path = Path(archive_path)
    output_dir = Path(output_dir)

    try:
        logger.info("Extracting artifact...")
        output_dir.mkdir(parents=True, exist_ok=True)

        _unpack(archive_path, output_dir)

        binary_name = get_binary_name(target_platform)
        binary_path = _find_binary(output_dir, binary_name)

        if target_platform != "windows":
            os.chmod(binary_path, 0o755)

        # 실행 파일을 고정 경로로 이동
        final_path = output_dir.parent / binary_name
        os.replace(binary_path, final_path)

        # 임시 파일 정리
        archive_path.unlink()
        shutil.rmtree(output_dir, ignore_errors=True)

        return final_path

    except K6Exception:
        raise
    except (OSError, zipfile.BadZipFile, tarfile.TarError) as e:
        logger.error(f"압축 해제 실패 - 아카이브: {archive_path}, 오류: {str(e)}")
        raise K6Exception(FailureCode.EXTRACTION_FAILED, f"Extraction error: {str(e)}") from e


def _unpack(archive_path: Path, output_dir: Path):
    name = archive_path.name
    if name.endswith(".zip"):
        with zipfile.ZipFile(archive_path, "r") as zip_ref:
            zip_ref.extractall(output_dir)
    elif name.endswith(".tar.gz"):
        with tarfile.open(archive_path, "r:gz") as tar_ref:
            # extraction filter 는 3.10.12 / 3.11.4 이후에만 존재
            if hasattr(tarfile, "data_filter"):
                tar_ref.extractall(output_dir, filter="data")
            else:
                tar_ref.extractall(output_dir)
    else:
        raise K6Exception(
            FailureCode.EXTRACTION_FAILED,
            f"Extraction error: unsupported archive format: {name}",
        )


def _find_binary(output_dir: Path, binary_name: str) -> Path:
    """압축 해제된 디렉터리에서 k6 실행 파일 탐색 (하위 폴더 포함)"""
    for candidate in sorted(output_dir.rglob(binary_name)):
        if candidate.is_file():
            logger.debug(f"k6 실행 파일 발견: {candidate}")
            return candidate

    raise K6Exception(
        FailureCode.EXTRACTION_FAILED,
        "Extraction error: k6 executable not found! Try reinstall",
    )
