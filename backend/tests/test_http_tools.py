import pytest
import requests

from trip_planner.llm.backends import ollama_backend
from trip_planner.llm.backends.ollama_backend import OllamaBackend
from trip_planner.llm.tools import booking_tool, payment_tool
from trip_planner.llm.tools.booking_tool import BookingBackendTool, BookingBackendUnavailable
from trip_planner.llm.tools.payment_tool import PaymentTool


class FakeResponse:
    def __init__(self, payload, status=200):
        self._payload = payload
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self._payload


def _recorder(calls, response):
    def fake_post(url, **kwargs):
        calls.append((url, kwargs))
        return response

    return fake_post


def test_ollama_backend_returns_message_content(monkeypatch):
    calls = []
    monkeypatch.setattr(
        ollama_backend.requests, "post", _recorder(calls, FakeResponse({"message": {"content": '{"days": []}'}}))
    )

    text = OllamaBackend(host="http://ollama:11434", model="llama3", timeout=7).generate_text("plan Goa")

    assert text == '{"days": []}'
    url, kwargs = calls[0]
    assert url == "http://ollama:11434/api/chat"
    assert kwargs["json"]["model"] == "llama3"
    assert kwargs["json"]["messages"][-1] == {"role": "user", "content": "plan Goa"}
    assert kwargs["timeout"] == 7


def test_ollama_backend_raises_on_http_error(monkeypatch):
    monkeypatch.setattr(ollama_backend.requests, "post", _recorder([], FakeResponse({}, status=503)))

    with pytest.raises(requests.HTTPError):
        OllamaBackend(host="http://ollama", model="llama3").generate_text("p")


def test_booking_tool_posts_with_bearer_token(monkeypatch):
    calls = []
    monkeypatch.setattr(booking_tool.requests, "post", _recorder(calls, FakeResponse({"quoteId": "q1"})))
    tool = BookingBackendTool(base_url="https://partner.example/api/", api_key="tok")

    assert tool.quote({"destination": "GOI"}) == {"quoteId": "q1"}
    tool.confirm("q1", {"userId": "u"})

    assert calls[0][0] == "https://partner.example/api/quote"
    assert calls[0][1]["headers"] == {"Authorization": "Bearer tok"}
    assert calls[1][0] == "https://partner.example/api/confirm"
    assert calls[1][1]["json"] == {"quoteId": "q1", "passenger": {"userId": "u"}}


def test_unconfigured_booking_tool_raises():
    tool = BookingBackendTool(base_url=None, api_key=None)

    assert not tool.configured
    with pytest.raises(BookingBackendUnavailable):
        tool.quote({})


def test_payment_order_amount_is_sent_in_paise(monkeypatch):
    calls = []
    monkeypatch.setattr(
        payment_tool.requests, "post", _recorder(calls, FakeResponse({"id": "order_9", "status": "created"}))
    )

    order = PaymentTool(key_id="rzp", key_secret="s").create_order(29800.5, receipt="mock_1")

    assert order["id"] == "order_9"
    kwargs = calls[0][1]
    assert kwargs["json"] == {"amount": 2980050, "currency": "INR", "receipt": "mock_1"}
    assert kwargs["auth"] == ("rzp", "s")


def test_unconfigured_payment_tool_raises():
    with pytest.raises(RuntimeError):
        PaymentTool(key_id=None, key_secret=None).create_order(100, receipt="r")
