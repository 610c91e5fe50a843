from typing import Any, Dict, List, Optional

from pydantic import BaseModel, PrivateAttr

# 메트릭 이름 -> threshold 표현식 목록 (예: {"http_req_duration": ["p(95)<500"]})
Threshold = Dict[str, List[str]]


class Stage(BaseModel):
    duration: str   # 예: "2m"
    target: int     # 도달할 VU 수


class Options(BaseModel):
    """k6 전역 옵션 (정의되지 않은 키도 그대로 전달)"""
    stages: Optional[List[Stage]] = None
    thresholds: Optional[Threshold] = None
    vus: Optional[int] = None
    duration: Optional[str] = None
    iterations: Optional[int] = None

    model_config = {
        "extra": "allow"
    }

    # 입력된 키 순서 (출력 순서를 입력과 맞추기 위함)
    _key_order: List[str] = PrivateAttr(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Options":
        options = cls.model_validate(data)
        options._key_order = list(data.keys())
        return options

    def to_dict(self) -> Dict[str, Any]:
        """설정된 키만 담은 딕셔너리 반환 (입력 순서 유지)"""
        dumped = self.model_dump(exclude_none=True, exclude_unset=True)
        ordered = {key: dumped[key] for key in self._key_order if key in dumped}
        for key, value in dumped.items():
            ordered.setdefault(key, value)
        return ordered
