"""Tests for platform detection and small helpers."""
import pytest

from k6builder import FailureCode, K6Exception
from k6builder.utils.byte_formatter import format_bytes
from k6builder.utils.check_utils import response_time_check, status_check
from k6builder.utils.platform_detector import detect_platform, get_binary_name
from k6builder.utils.request_utils import k6_delete, k6_post, k6_put


@pytest.mark.parametrize("system_name, expected", [
    ("Windows", "windows"),
    ("Darwin", "macos"),
    ("Linux", "linux"),
])
def test_detect_platform(system_name, expected):
    assert detect_platform(system_name) == expected


def test_detect_platform_unsupported_names_system():
    with pytest.raises(K6Exception) as exc_info:
        detect_platform("FreeBSD")
    assert exc_info.value.code == FailureCode.UNSUPPORTED_PLATFORM
    assert "FreeBSD" in str(exc_info.value)


def test_binary_name():
    assert get_binary_name("windows") == "k6.exe"
    assert get_binary_name("linux") == "k6"
    assert get_binary_name("macos") == "k6"


def test_format_bytes():
    assert format_bytes(0) == "0 Bytes"
    assert format_bytes(512) == "512 Bytes"
    assert format_bytes(1536) == "1.5 KB"
    assert format_bytes(1024 * 1024) == "1 MB"
    assert format_bytes(3 * 1024 ** 3) == "3 GB"


def test_check_helpers():
    assert status_check(201).name == "status is 201"
    assert status_check(201).condition == "(r) => r.status === 201"
    assert response_time_check(300).condition == "(r) => r.timings.duration < 300"


def test_request_helpers():
    post = k6_post("https://example.test", {"a": 1}, headers={"X": "y"})
    assert (post.method, post.body, post.headers) == ("POST", {"a": 1}, {"X": "y"})
    assert k6_put("https://example.test").method == "PUT"
    assert k6_delete("https://example.test").body is None
