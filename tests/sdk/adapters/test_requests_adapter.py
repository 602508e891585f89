import json
from typing import Any, Optional
from unittest.mock import Mock

import pytest
import requests

from neople import NeopleApiError, RequestConfig, RequestsAdapter


def make_response(
    status_code: int, body: Any = None, reason: Optional[str] = None
) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.encoding = "utf-8"
    if body is None:
        response._content = b""
    elif isinstance(body, str):
        response._content = body.encode("utf-8")
    else:
        response._content = json.dumps(body).encode("utf-8")
    return response


@pytest.fixture
def session() -> Mock:
    return Mock(spec=requests.Session)


class TestRequestsAdapter:
    class TestSuccess:
        async def test_get_with_params_and_headers(self, session: Mock):
            session.get.return_value = make_response(200, {"rows": []}, "OK")

            result = await RequestsAdapter(session).get(
                "https://api.example.com/test",
                RequestConfig(
                    headers={"Authorization": "Bearer key"},
                    params={"itemName": "무기 상자", "limit": 10, "apikey": "key"},
                    timeout=3.0,
                ),
            )

            assert result == {"rows": []}
            session.get.assert_called_once_with(
                "https://api.example.com/test?itemName=%EB%AC%B4%EA%B8%B0+%EC%83%81%EC%9E%90&limit=10&apikey=key",
                headers={"Accept": "application/json", "Authorization": "Bearer key"},
                timeout=3.0,
            )

        async def test_without_config(self, session: Mock):
            session.get.return_value = make_response(200, {"ok": True})

            result = await RequestsAdapter(session).get("https://api.example.com/test")

            assert result == {"ok": True}
            session.get.assert_called_once_with(
                "https://api.example.com/test",
                headers={"Accept": "application/json"},
                timeout=None,
            )

    class TestErrors:
        async def test_http_error_status(self, session: Mock):
            session.get.return_value = make_response(
                403, {"error": {"code": "API001"}}, "Forbidden"
            )

            with pytest.raises(NeopleApiError) as exc_info:
                await RequestsAdapter(session).get("https://api.example.com/test")

            assert exc_info.value.status == 403
            assert exc_info.value.message == "HTTP 403: Forbidden"
            assert exc_info.value.response == {"error": {"code": "API001"}}

        async def test_http_error_with_text_body(self, session: Mock):
            session.get.return_value = make_response(500, "boom", "Internal Server Error")

            with pytest.raises(NeopleApiError) as exc_info:
                await RequestsAdapter(session).get("https://api.example.com/test")

            assert exc_info.value.status == 500
            assert exc_info.value.message == "HTTP 500: Internal Server Error"
            assert exc_info.value.response == "boom"

        async def test_raised_http_error_with_response(self, session: Mock):
            response = make_response(404, {"message": "missing"}, "Not Found")
            session.get.side_effect = requests.HTTPError(response=response)

            with pytest.raises(NeopleApiError) as exc_info:
                await RequestsAdapter(session).get("https://api.example.com/test")

            assert exc_info.value.status == 404
            assert exc_info.value.message == "HTTP 404: Not Found"
            assert exc_info.value.response == {"message": "missing"}

        async def test_no_response_received(self, session: Mock):
            request = requests.Request("GET", "https://api.example.com/test")
            session.get.side_effect = requests.ConnectionError(request=request)

            with pytest.raises(NeopleApiError) as exc_info:
                await RequestsAdapter(session).get("https://api.example.com/test")

            assert exc_info.value.status == 0
            assert exc_info.value.message == "Network Error: No response received"
            assert exc_info.value.response is request

        async def test_request_setup_error(self, session: Mock):
            session.get.side_effect = requests.RequestException("Invalid URL")

            with pytest.raises(NeopleApiError) as exc_info:
                await RequestsAdapter(session).get("https://api.example.com/test")

            assert exc_info.value.status == 0
            assert exc_info.value.message == "Invalid URL"

        async def test_request_error_without_message(self, session: Mock):
            session.get.side_effect = requests.RequestException()

            with pytest.raises(NeopleApiError) as exc_info:
                await RequestsAdapter(session).get("https://api.example.com/test")

            assert exc_info.value.message == "Unknown requests error"

        @pytest.mark.parametrize(
            "error", [requests.Timeout(), requests.ReadTimeout(), requests.ConnectTimeout()]
        )
        async def test_timeout(self, session: Mock, error: Exception):
            session.get.side_effect = error

            with pytest.raises(NeopleApiError) as exc_info:
                await RequestsAdapter(session).get(
                    "https://api.example.com/test", RequestConfig(timeout=0.1)
                )

            assert exc_info.value.status == 0
            assert "timeout" in exc_info.value.message.lower()

        async def test_invalid_json(self, session: Mock):
            session.get.return_value = make_response(200, "not json", "OK")

            with pytest.raises(NeopleApiError) as exc_info:
                await RequestsAdapter(session).get("https://api.example.com/test")

            assert exc_info.value.status == 0
            assert exc_info.value.message.startswith("Invalid JSON response")
            assert exc_info.value.response == "not json"

        async def test_body_not_valid_utf8(self, session: Mock):
            response = make_response(200, reason="OK")
            response._content = b'{"a": "\xff\xfe"}'
            session.get.return_value = response

            with pytest.raises(NeopleApiError) as exc_info:
                await RequestsAdapter(session).get("https://api.example.com/test")

            assert exc_info.value.status == 0
            assert exc_info.value.message.startswith("Invalid JSON response")
