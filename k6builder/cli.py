"""
k6 바이너리를 찾아(필요하면 설치) 받은 인자를 그대로 넘겨 실행하는 CLI

예: k6builder run script.js
"""
import asyncio
import logging
import os
import sys
from typing import List, Optional

from k6builder.common.exception.k6_exception import K6Exception
from k6builder.core.config import settings
from k6builder.services.install.k6_path_service import get_k6_binary_path
from k6builder.utils.k6_executor import K6Executor

logger = logging.getLogger(__name__)


def configure_logging():
    # DEBUG 환경변수가 있으면 디버그 로그까지 출력
    level_name = "DEBUG" if os.getenv("DEBUG") else settings.LOG_LEVEL.upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


async def run_k6(args: List[str]) -> int:
    binary_path = await get_k6_binary_path()
    return await K6Executor(binary_path).execute(args)


def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        return asyncio.run(run_k6(args))
    except K6Exception as e:
        logger.error(f"k6 실행 실패: {e}")
        return e.exit_code


if __name__ == "__main__":
    sys.exit(main())
