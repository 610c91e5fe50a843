import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

PACKAGE_ROOT = Path(__file__).resolve().parent.parent


class Settings:
    """라이브러리 설정"""

    # k6 바이너리 배포 설정
    K6_VERSION: str = os.getenv("K6_VERSION", "1.4.0")
    K6_DOWNLOAD_HOST: str = os.getenv("K6_DOWNLOAD_HOST", "github.com")
    K6_DOWNLOAD_ORG: str = os.getenv("K6_DOWNLOAD_ORG", "grafana")
    K6_DOWNLOAD_PROJECT: str = os.getenv("K6_DOWNLOAD_PROJECT", "k6")
    K6_DOWNLOAD_TIMEOUT_SECONDS: int = int(os.getenv("K6_DOWNLOAD_TIMEOUT_SECONDS", "30"))

    # 설치 경로 설정 (기본값: 패키지 내부 k6 폴더)
    K6_INSTALL_DIR: str = os.getenv("K6_INSTALL_DIR", str(PACKAGE_ROOT / "k6"))

    # 사용자 지정 바이너리 경로 파일 (.k6path)
    K6_PATH_FILE: str = os.getenv("K6_PATH_FILE", ".k6path")

    # 로깅 설정
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def get_install_config(cls) -> dict:
        """설치 관련 설정을 딕셔너리로 반환"""
        return {
            "version": cls.K6_VERSION,
            "download_host": cls.K6_DOWNLOAD_HOST,
            "download_org": cls.K6_DOWNLOAD_ORG,
            "download_project": cls.K6_DOWNLOAD_PROJECT,
            "install_dir": cls.K6_INSTALL_DIR,
            "path_file": cls.K6_PATH_FILE,
            "timeout_seconds": cls.K6_DOWNLOAD_TIMEOUT_SECONDS,
        }


settings = Settings()
