"""
k6 바이너리 실행을 위한 유틸리티 클래스
표준 입출력을 그대로 물려받아 k6 프로세스를 실행하고 종료 코드를 돌려준다
"""
import asyncio
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Union

from k6builder.common.exception.k6_exception import K6Exception
from k6builder.common.response.code import FailureCode

logger = logging.getLogger(__name__)


class K6Executor:
    """k6 명령어 실행 유틸리티"""

    def __init__(self, binary_path: Union[str, Path]):
        self.binary_path = str(binary_path)

    @staticmethod
    def build_run_args(
        script_path: Union[str, Path],
        output: Optional[str] = None,
        quiet: bool = False,
        verbose: bool = False
    ) -> List[str]:
        """
        k6 run 명령어 인자 구성

        Returns:
            List[str]: ["run", script_path, "--out", output, "--quiet", "--verbose"] 중 해당 항목
        """
        args = ["run", str(script_path)]
        if output:
            args.extend(["--out", output])
        if quiet:
            args.append("--quiet")
        if verbose:
            args.append("--verbose")
        return args

    async def execute(self, args: List[str], environment: Optional[Dict[str, str]] = None) -> int:
        """
        k6 실행 후 종료 코드 반환

        Args:
            args: k6 에 전달할 인자 목록
            environment: 현재 환경변수 위에 덮어쓸 환경변수

        Returns:
            int: k6 종료 코드

        Raises:
            K6Exception: 프로세스를 실행하지 못했을 때 (PROCESS_SPAWN_FAILED)
        """
        env = {**os.environ, **(environment or {})}
        command = [self.binary_path, *args]

        logger.debug(f"-> Command: {' '.join(command)}")

        try:
            # stdin/stdout/stderr 는 호출한 프로세스의 것을 그대로 사용
            process = await asyncio.create_subprocess_exec(*command, env=env)
        except OSError as e:
            logger.error(f"k6 실행 중 오류 발생: {str(e)}")
            raise K6Exception(
                FailureCode.PROCESS_SPAWN_FAILED,
                f"Failed to start k6 ({self.binary_path}): {str(e)}",
            ) from e

        return await process.wait()

    async def run_or_raise(self, args: List[str], environment: Optional[Dict[str, str]] = None) -> None:
        """k6 실행 후 종료 코드가 0 이 아니면 예외 발생"""
        return_code = await self.execute(args, environment)
        if return_code != 0:
            raise K6Exception(
                FailureCode.PROCESS_EXITED_NON_ZERO,
                f"k6 exited with code {return_code}",
                exit_code=return_code,
            )
