import httpx
import pytest
from http_client import HttpClient

class FakeAsyncClient:
    """Returns a sequence of responses for each call to request()."""
    def __init__(self, responses):
        self._responses = list(responses)
        self.calls = []

    async def request(self, method, path, **kwargs):
        self.calls.append((method, path, kwargs))
        if not self._responses:
            raise RuntimeError("No more fake responses")
        return self._responses.pop(0)

    async def aclose(self):
        pass

def fake_response(status_code, json_data=None):
    return httpx.Response(status_code, json=json_data or {}, request=httpx.Request("GET", "http://animals.test/bow"))

@pytest.mark.asyncio
async def test_server_error_is_not_retried():
    hc = HttpClient(base_url="http://animals.test")
    fake = FakeAsyncClient([fake_response(500), fake_response(200, {"ok": 1})])

    async with hc:
        hc._client = fake
        with pytest.raises(httpx.HTTPStatusError):
            await hc.request("GET", "/bow")
    assert len(fake.calls) == 1

@pytest.mark.asyncio
async def test_default_params_and_request_id():
    hc = HttpClient(base_url="http://animals.test/", default_params={"key": "abc"})
    fake = FakeAsyncClient([fake_response(200, {"ok": 1})])

    async with hc:
        hc._client = fake
        resp = await hc.request("GET", "/bow", params={"pageSize": 5}, req_id="r-1")
    assert resp.json() == {"ok": 1}
    _, _, kwargs = fake.calls[0]
    assert kwargs["params"] == {"key": "abc", "pageSize": 5}
    assert kwargs["headers"]["X-Request-Id"] == "r-1"
    assert hc.base_url == "http://animals.test"

def test_timeouts_default_to_none():
    hc = HttpClient(base_url="http://animals.test")
    assert hc.timeout.read is None and hc.timeout.connect is None
    hc = HttpClient(base_url="http://animals.test", connect_timeout=2, read_timeout=9)
    assert (hc.timeout.connect, hc.timeout.read) == (2, 9)

@pytest.mark.asyncio
async def test_transport_error_propagates(capsys):
    def handler(request):
        raise httpx.ReadTimeout("slow", request=request)
    async with HttpClient(base_url="http://animals.test", transport=httpx.MockTransport(handler)) as hc:
        with pytest.raises(httpx.ReadTimeout):
            await hc.request("GET", "/bow", req_id="r-2")
    assert "[req#r-2] [fatal]" in capsys.readouterr().err
