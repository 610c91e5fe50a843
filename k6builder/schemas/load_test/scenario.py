from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from k6builder.schemas.load_test.options import Options
from k6builder.schemas.load_test.request import Step

Executor = Literal[
    "shared-iterations",
    "per-vu-iterations",
    "constant-vus",
    "ramping-vus",
    "constant-arrival-rate",
    "ramping-arrival-rate",
]

DEFAULT_EXECUTOR = "shared-iterations"


class Scenario(BaseModel):
    """
    k6 시나리오

    name 은 생성된 스크립트에서 함수 이름으로 쓰이므로 JavaScript 식별자여야 한다.
    rate, duration, preAllocatedVUs 같은 executor 별 옵션은 추가 키로 받아서 그대로 출력한다.
    """
    name: str
    steps: List[Step] = Field(default_factory=list)
    executor: Optional[str] = None   # Executor 값 중 하나 (검증하지 않고 그대로 출력)

    model_config = {
        "extra": "allow"
    }

    def extra_options(self) -> Dict[str, Any]:
        """name/steps/executor 를 제외한 시나리오 옵션 (입력 순서 유지)"""
        return dict(self.model_extra or {})


class K6TestConfig(BaseModel):
    options: Optional[Options] = None
    scenarios: List[Scenario] = Field(default_factory=list)
    setup: Optional[str] = None
    teardown: Optional[str] = None
