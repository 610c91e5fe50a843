from typing import Any, Dict, Optional

from k6builder.schemas.load_test import HttpMethod, Request


def http_k6_request(
    method: HttpMethod,
    url: str,
    body: Optional[Any] = None,
    params: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None
) -> Request:
    """
    k6 HTTP 요청 생성

    Args:
        method: HTTP 메서드 (GET, POST 등)
        url: 요청 URL
        body: 요청 본문
        params: k6 request params
        headers: 요청 헤더

    Returns:
        Request: 요청 설정
    """
    return Request(method=method, url=url, body=body, params=params, headers=headers)


def k6_get(url: str, **options) -> Request:
    return http_k6_request("GET", url, **options)


def k6_post(url: str, body: Optional[Any] = None, **options) -> Request:
    return http_k6_request("POST", url, body=body, **options)


def k6_put(url: str, body: Optional[Any] = None, **options) -> Request:
    return http_k6_request("PUT", url, body=body, **options)


def k6_delete(url: str, **options) -> Request:
    return http_k6_request("DELETE", url, **options)
