from .request import (
    HttpMethod,
    Request,
    Check,
    Step
)
from .options import (
    Threshold,
    Stage,
    Options
)
from .scenario import (
    Executor,
    DEFAULT_EXECUTOR,
    Scenario,
    K6TestConfig
)

__all__ = [
    "HttpMethod",
    "Request",
    "Check",
    "Step",
    "Threshold",
    "Stage",
    "Options",
    "Executor",
    "DEFAULT_EXECUTOR",
    "Scenario",
    "K6TestConfig",
]
