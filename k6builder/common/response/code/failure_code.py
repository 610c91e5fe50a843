from k6builder.common.response.code.base_code import BaseCode

class FailureCode(BaseCode):
    UNSUPPORTED_PLATFORM = ("지원하지 않는 운영체제입니다", 1)
    DOWNLOAD_FAILED = ("k6 아카이브 다운로드에 실패했습니다", 1)
    EXTRACTION_FAILED = ("k6 아카이브 압축 해제에 실패했습니다", 1)
    OVERRIDE_PATH_INVALID = (".k6path 에 지정된 k6 바이너리를 찾을 수 없습니다", 1)
    PROCESS_SPAWN_FAILED = ("k6 프로세스를 실행할 수 없습니다", 1)
    PROCESS_EXITED_NON_ZERO = ("k6 가 0이 아닌 종료 코드로 끝났습니다", 1)
