from k6builder.schemas.load_test import Check


def status_check(expected_status: int) -> Check:
    """응답 상태 코드 검증 Check 생성"""
    return Check(
        name=f"status is {expected_status}",
        condition=f"(r) => r.status === {expected_status}",
    )


def response_time_check(max_time: int) -> Check:
    """응답 시간 검증 Check 생성 (max_time: ms)"""
    return Check(
        name=f"response time < {max_time}ms",
        condition=f"(r) => r.timings.duration < {max_time}",
    )
