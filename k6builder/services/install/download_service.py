"""
k6 릴리즈 아카이브 다운로드 모듈

임시 파일(.download)에 스트리밍으로 받은 뒤 완료되면 최종 경로로 rename 한다.
"""

import logging
import os
import sys
import time
from pathlib import Path
from typing import Optional, TextIO, Union

import httpx

from k6builder.common.exception.k6_exception import K6Exception
from k6builder.common.response.code import FailureCode
from k6builder.utils.byte_formatter import format_bytes
from k6builder.utils.file_writer import FileWriter

logger = logging.getLogger(__name__)

PROGRESS_BAR_LENGTH = 30
PROGRESS_MIN_STEP_PERCENT = 1.0
PROGRESS_MIN_INTERVAL_SECONDS = 0.1


class DownloadProgress:
    """다운로드 진행률 출력 (1% 또는 100ms 단위로만 갱신)"""

    def __init__(self, total_size: int, stream: Optional[TextIO] = None):
        self.total_size = total_size
        self.downloaded_size = 0
        self.stream = stream or sys.stdout
        self._last_progress = 0.0
        self._last_update = 0.0

    @property
    def progress(self) -> float:
        if not self.total_size:
            return 0.0
        return min(self.downloaded_size / self.total_size * 100, 100.0)

    def advance(self, chunk_size: int) -> bool:
        """
        다운로드된 바이트 수를 반영하고 필요하면 진행률을 출력

        Returns:
            bool: 이번 호출에서 진행률을 출력했는지 여부
        """
        self.downloaded_size += chunk_size
        progress = self.progress
        now = time.monotonic()

        if (progress - self._last_progress < PROGRESS_MIN_STEP_PERCENT
                and now - self._last_update < PROGRESS_MIN_INTERVAL_SECONDS):
            return False

        filled_length = round(PROGRESS_BAR_LENGTH * progress / 100)
        bar = "#" * filled_length + "-" * (PROGRESS_BAR_LENGTH - filled_length)
        self.stream.write(
            f"\r-> Downloading: [{bar}] {progress:.1f}% | "
            f"{format_bytes(self.downloaded_size)}/{format_bytes(self.total_size)}"
        )
        self.stream.flush()
        self._last_progress = progress
        self._last_update = now
        return True

    def finish(self):
        self.stream.write("\n")
        self.stream.flush()


async def download_file(
    url: str,
    output_path: Union[str, Path],
    client: Optional[httpx.AsyncClient] = None,
    timeout_seconds: int = 30,
    progress_stream: Optional[TextIO] = None,
    _redirected: bool = False
) -> Path:
    """
    URL 의 파일을 output_path 로 다운로드

    Args:
        url: 다운로드 URL
        output_path: 저장할 경로 (상위 디렉터리가 없으면 생성)
        client: 재사용할 httpx.AsyncClient (없으면 새로 생성)
        timeout_seconds: 연결 타임아웃 (본문 읽기는 제한 없음)
        progress_stream: 진행률 출력 대상 (기본값: stdout)

    Returns:
        Path: 저장된 파일 경로

    Raises:
        K6Exception: 200/302 이외의 응답 또는 전송 오류 (DOWNLOAD_FAILED)
    """
    output_path = Path(output_path)

    if client is None:
        timeout = httpx.Timeout(timeout_seconds, read=None)
        async with httpx.AsyncClient(timeout=timeout) as new_client:
            return await download_file(url, output_path, new_client, timeout_seconds, progress_stream)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = output_path.with_name(output_path.name + ".download")

    redirect_url = None
    try:
        async with client.stream("GET", url) as response:
            # github 릴리즈는 한 번 302 로 리다이렉트된다
            if response.status_code == 302 and not _redirected:
                redirect_url = response.headers.get("location")
                if not redirect_url:
                    raise K6Exception(
                        FailureCode.DOWNLOAD_FAILED,
                        "Failed to download: redirect without location header",
                    )
            elif response.status_code != 200:
                raise K6Exception(
                    FailureCode.DOWNLOAD_FAILED,
                    f"Failed to download: {response.status_code} {response.reason_phrase}",
                )
            else:
                total_size = int(response.headers.get("content-length") or 0)
                progress = DownloadProgress(total_size, progress_stream)
                await _write_stream(response, tmp_path, progress)
                progress.finish()
    except httpx.HTTPError as e:
        logger.error(f"다운로드 중 오류 발생: {url}, {str(e)}")
        raise K6Exception(FailureCode.DOWNLOAD_FAILED, f"Failed to download: {str(e)}") from e

    if redirect_url is not None:
        logger.debug(f"Following redirect: {redirect_url}")
        return await download_file(
            redirect_url, output_path, client, timeout_seconds, progress_stream, _redirected=True
        )

    os.replace(tmp_path, output_path)
    logger.debug(f"다운로드 완료: {output_path}")
    return output_path


async def _write_stream(response: httpx.Response, tmp_path: Path, progress: DownloadProgress):
    """응답 본문을 임시 파일에 기록 (실패시 임시 파일 제거)"""
    try:
        with open(tmp_path, "wb") as f:
            async for chunk in response.aiter_bytes():
                f.write(chunk)
                progress.advance(len(chunk))
    except Exception:
        FileWriter.remove_file(tmp_path)
        raise
