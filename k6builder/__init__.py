from k6builder.common.exception.k6_exception import K6Exception
from k6builder.common.response.code import FailureCode
from k6builder.schemas.load_test import (
    Check,
    K6TestConfig,
    Options,
    Request,
    Scenario,
    Stage,
    Step,
    Threshold,
)
from k6builder.services.install import K6InstallConfig, get_k6_binary_path, install_binary
from k6builder.services.testing import (
    K6TestBuilder,
    create_k6_load_test,
    create_k6_smoke_test,
    create_k6_spike_test,
    create_k6_stress_test,
)
from k6builder.utils.byte_formatter import format_bytes
from k6builder.utils.check_utils import response_time_check, status_check
from k6builder.utils.platform_detector import detect_platform
from k6builder.utils.request_utils import http_k6_request, k6_delete, k6_get, k6_post, k6_put

__all__ = [
    "K6Exception",
    "FailureCode",
    "Check",
    "K6TestConfig",
    "Options",
    "Request",
    "Scenario",
    "Stage",
    "Step",
    "Threshold",
    "K6InstallConfig",
    "get_k6_binary_path",
    "install_binary",
    "K6TestBuilder",
    "create_k6_load_test",
    "create_k6_smoke_test",
    "create_k6_spike_test",
    "create_k6_stress_test",
    "format_bytes",
    "response_time_check",
    "status_check",
    "detect_platform",
    "http_k6_request",
    "k6_delete",
    "k6_get",
    "k6_post",
    "k6_put",
]
