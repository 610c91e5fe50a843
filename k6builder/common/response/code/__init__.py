from k6builder.common.response.code.base_code import BaseCode
from k6builder.common.response.code.failure_code import FailureCode

__all__ = [
    'FailureCode',
    'BaseCode',
]
