"""Talking points: Claude when available, template otherwise"""

from dataclasses import replace
from types import SimpleNamespace

import anthropic
import httpx
import pytest

from savings_qualifier import narrative
from savings_qualifier.calculator import compute_savings


class StubMessages:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


def stub_client(**kwargs):
    return SimpleNamespace(messages=StubMessages(**kwargs))


def test_fallback_mentions_savings(filled_session, catalog, tv_cost):
    result = compute_savings(filled_session, catalog, tv_cost)
    text = narrative.fallback_pitch(filled_session, result)
    assert "1 Gig" in text
    assert "$80.00" in text
    assert "$960.00" in text
    assert "Spectrum" in text


def test_fallback_for_negative_savings(filled_session, catalog, tv_cost):
    session = replace(filled_session, has_tv_bundle=True)
    result = compute_savings(session, catalog, tv_cost)
    text = narrative.fallback_pitch(session, result)
    assert "YouTube TV" in text
    assert "$3.00 a month more" in text


def test_fallback_at_break_even(filled_session, catalog, tv_cost):
    session = replace(filled_session, current_monthly_cost="70")
    result = compute_savings(session, catalog, tv_cost)
    assert "costs the same" in narrative.fallback_pitch(session, result)


def test_pitch_without_client_uses_template(filled_session, catalog, tv_cost, monkeypatch):
    monkeypatch.setattr(narrative, "get_client", lambda: None)
    result = compute_savings(filled_session, catalog, tv_cost)
    assert narrative.pitch(filled_session, result) == narrative.fallback_pitch(filled_session, result)


def test_pitch_uses_model_text(filled_session, catalog, tv_cost):
    response = SimpleNamespace(content=[SimpleNamespace(type="text", text="  Switch and save $80.00 a month.  ")])
    client = stub_client(response=response)
    result = compute_savings(filled_session, catalog, tv_cost)

    assert narrative.pitch(filled_session, result, client=client) == "Switch and save $80.00 a month."
    call = client.messages.calls[0]
    assert '"monthly_savings": "80"' in call["messages"][0]["content"]
    assert call["model"] == narrative.config.ANTHROPIC_MODEL


def test_pitch_falls_back_on_empty_response(filled_session, catalog, tv_cost):
    client = stub_client(response=SimpleNamespace(content=[]))
    result = compute_savings(filled_session, catalog, tv_cost)
    assert narrative.pitch(filled_session, result, client=client) == narrative.fallback_pitch(filled_session, result)


def test_pitch_falls_back_on_api_error(filled_session, catalog, tv_cost):
    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
    client = stub_client(error=anthropic.APIConnectionError(request=request))
    result = compute_savings(filled_session, catalog, tv_cost)
    assert narrative.pitch(filled_session, result, client=client) == narrative.fallback_pitch(filled_session, result)


def test_model_pitch_lets_api_errors_through(filled_session, catalog, tv_cost):
    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
    client = stub_client(error=anthropic.APIConnectionError(request=request))
    result = compute_savings(filled_session, catalog, tv_cost)
    with pytest.raises(anthropic.APIError):
        narrative.model_pitch(filled_session, result, client)


def test_model_pitch_is_empty_without_text(filled_session, catalog, tv_cost):
    client = stub_client(response=SimpleNamespace(content=[SimpleNamespace(type="tool_use")]))
    result = compute_savings(filled_session, catalog, tv_cost)
    assert narrative.model_pitch(filled_session, result, client) == ""


def test_pitch_uses_custom_writer(filled_session, catalog, tv_cost):
    """The app passes a cached writer; its answer is used as is"""
    client = stub_client()
    result = compute_savings(filled_session, catalog, tv_cost)
    seen = []

    def writer(session, res, c):
        seen.append(c)
        return "Cached copy."

    assert narrative.pitch(filled_session, result, client=client, writer=writer) == "Cached copy."
    assert seen == [client]
    assert client.messages.calls == []


def test_pitch_falls_back_when_writer_fails(filled_session, catalog, tv_cost):
    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")

    def writer(session, res, c):
        raise anthropic.APIConnectionError(request=request)

    result = compute_savings(filled_session, catalog, tv_cost)
    text = narrative.pitch(filled_session, result, client=stub_client(), writer=writer)
    assert text == narrative.fallback_pitch(filled_session, result)
