from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"]


class Request(BaseModel):
    """k6 가 실행할 HTTP 요청"""
    method: HttpMethod
    url: str
    body: Optional[Any] = None
    params: Optional[Dict[str, Any]] = None   # k6 request params (tags, timeout 등)
    headers: Optional[Dict[str, str]] = None

    model_config = {
        "frozen": True
    }


class Check(BaseModel):
    """
    k6 응답 검증 조건

    condition 은 k6 런타임에서 평가되는 JavaScript 함수 문자열이다.
    예: "(r) => r.status === 200"
    """
    name: str
    condition: str

    @field_validator("condition", mode="before")
    @classmethod
    def condition_must_be_text(cls, value: Any) -> Any:
        # 파이썬 함수 소스는 k6 런타임에서 실행할 수 없으므로 문자열만 허용
        if callable(value):
            raise ValueError("condition 은 JavaScript 함수 문자열이어야 합니다 (예: \"(r) => r.status === 200\")")
        return value


class Step(BaseModel):
    """시나리오 안에서 순서대로 실행되는 요청 단위"""
    name: Optional[str] = None
    request: Request
    checks: List[Check] = Field(default_factory=list)
    sleep: Optional[Union[int, float, str]] = None
