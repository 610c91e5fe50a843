from typing import Optional

from k6builder.common.response.code.base_code import BaseCode

class K6Exception(Exception):
    def __init__(self, code: BaseCode, message: str = None, exit_code: Optional[int] = None):
        self.code = code
        self.message = message or code.message()
        # k6 프로세스 종료 코드가 있으면 그대로 전달
        self.exit_code = exit_code if exit_code is not None else code.exit_code()
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"
