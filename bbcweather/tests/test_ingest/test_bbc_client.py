"""Tests for BBC Weather client with mocked httpx."""

import httpx
import pytest
import respx

from bbcweather.ingest.bbc_client import BbcWeatherClient
from bbcweather.ingest.errors import NetworkError

PAGE_URL = "https://test-bbc.example.com/weather/360630"


@pytest.fixture
def client() -> BbcWeatherClient:
    return BbcWeatherClient(base_url="https://test-bbc.example.com/weather/")


class TestGetPage:
    @respx.mock
    def test_success(self, client: BbcWeatherClient, cairo_html: str):
        respx.get(PAGE_URL).mock(return_value=httpx.Response(200, text=cairo_html))

        result = client.get_page("360630")
        assert "wr-location-name-id" in result

    @respx.mock
    def test_user_agent_header(self, client: BbcWeatherClient):
        route = respx.get(PAGE_URL).mock(return_value=httpx.Response(200, text=""))

        client.get_page("360630")
        assert route.called
        request = route.calls[0].request
        assert "bbcweather" in request.headers["user-agent"]

    @respx.mock
    def test_follows_redirect(self, client: BbcWeatherClient):
        respx.get(PAGE_URL).mock(
            return_value=httpx.Response(
                301, headers={"Location": "https://test-bbc.example.com/weather/moved"}
            )
        )
        respx.get("https://test-bbc.example.com/weather/moved").mock(
            return_value=httpx.Response(200, text="<html>moved</html>")
        )

        assert client.get_page("360630") == "<html>moved</html>"

    @respx.mock
    def test_server_error_not_retried(self, client: BbcWeatherClient):
        route = respx.get(PAGE_URL).mock(return_value=httpx.Response(503))

        with pytest.raises(NetworkError) as exc_info:
            client.get_page("360630")
        assert exc_info.value.status_code == 503
        assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)
        assert route.call_count == 1

    @respx.mock
    def test_not_found(self, client: BbcWeatherClient):
        respx.get(PAGE_URL).mock(return_value=httpx.Response(404))

        with pytest.raises(NetworkError) as exc_info:
            client.get_page("360630")
        assert exc_info.value.status_code == 404
        assert exc_info.value.url == PAGE_URL

    @respx.mock
    def test_connection_refused(self, client: BbcWeatherClient):
        respx.get(PAGE_URL).mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(NetworkError) as exc_info:
            client.get_page("360630")
        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @respx.mock
    def test_timeout(self, client: BbcWeatherClient):
        respx.get(PAGE_URL).mock(side_effect=httpx.ReadTimeout("slow"))

        with pytest.raises(NetworkError):
            client.get_page("360630")

    @respx.mock
    def test_logs_network_error(self, client: BbcWeatherClient, caplog):
        respx.get(PAGE_URL).mock(side_effect=httpx.ConnectError("refused"))

        with caplog.at_level("ERROR"), pytest.raises(NetworkError):
            client.get_page("360630")
        assert "Network Error" in caplog.text
