"""
k6 스크립트 파일 저장을 위한 유틸리티 클래스
"""
from pathlib import Path
from typing import Union
import logging

logger = logging.getLogger(__name__)


class FileWriter:
    """스크립트 파일 저장/삭제 유틸리티"""

    @staticmethod
    def write_to_path(content: str, file_path: Union[str, Path]) -> str:
        """
        지정된 경로에 내용을 그대로 저장

        Args:
            content: 저장할 파일 내용
            file_path: 저장할 파일 경로

        Returns:
            str: 저장된 파일의 전체 경로

        Raises:
            OSError: 파일 저장 실패시
        """
        target_path = Path(file_path)

        try:
            with open(target_path, 'w', encoding='utf-8') as f:
                f.write(content)

            logger.debug(f"파일이 성공적으로 저장되었습니다: {target_path}")
            return str(target_path)

        except OSError as e:
            logger.error(f"파일 저장 실패 - 경로: {target_path}, 오류: {str(e)}")
            raise

    @staticmethod
    def remove_file(file_path: Union[str, Path]) -> bool:
        """
        파일 제거 (실패해도 예외를 던지지 않음)

        Args:
            file_path: 제거할 파일 경로

        Returns:
            bool: 제거 성공 여부
        """
        try:
            file_path_obj = Path(file_path)
            if file_path_obj.exists():
                file_path_obj.unlink()
                logger.debug(f"파일이 성공적으로 제거되었습니다: {file_path}")
                return True
            return False
        except OSError as e:
            logger.warning(f"파일 제거 실패 - 경로: {file_path}, 오류: {str(e)}")
            return False
