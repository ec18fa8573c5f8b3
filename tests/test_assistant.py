from unittest.mock import Mock, patch

import pytest
import requests

from assistant import (
    DEFAULT_ANSWER,
    FALLBACK_RESPONSE,
    ask_assistant,
    build_payload,
    canned_response,
)
from config import Settings


@pytest.fixture
def settings():
    return Settings(assistant_api_key="test-key", assistant_url="https://llm.example/v1/models")


def _ok_response(text="Never click unexpected links."):
    return Mock(
        status_code=200,
        json=Mock(return_value={"candidates": [{"content": {"parts": [{"text": text}]}}]}),
    )


def test_canned_routing():
    assert canned_response("What is phishing?").startswith("Phishing is a cybercrime")
    assert canned_response("Is my email safe?").startswith("To stay safe with emails")
    assert canned_response("I got a weird SMS").startswith("SMS phishing (smishing)")
    assert canned_response("scam on Instagram").startswith("Social media scams")
    assert canned_response("best password manager?").startswith("Password security tips")
    assert canned_response("thanks!").startswith("You're welcome")
    assert canned_response("tell me a joke") == DEFAULT_ANSWER


def test_build_payload_maps_history_roles(settings):
    history = [{"role": "user", "content": "hi"}, {"role": "assistant", "content": "hello"}]
    payload = build_payload("is this safe?", history, settings)
    roles = [c["role"] for c in payload["contents"]]
    assert roles == ["user", "model", "user", "model", "user"]
    assert payload["contents"][-1]["parts"][0]["text"] == "is this safe?"
    assert payload["generationConfig"]["maxOutputTokens"] == settings.assistant_max_tokens
    assert len(payload["safetySettings"]) == 4


def test_success(settings):
    with patch("assistant.requests.post", return_value=_ok_response()) as post:
        reply = ask_assistant("How do I spot phishing?", settings=settings)
    assert reply.success is True
    assert reply.response == "Never click unexpected links."
    assert reply.error is None
    url = post.call_args[0][0]
    assert url == "https://llm.example/v1/models/gemini-pro:generateContent"
    assert post.call_args[1]["params"] == {"key": "test-key"}
    assert post.call_args[1]["timeout"] == settings.assistant_timeout


def test_missing_api_key_falls_back_without_request():
    with patch("assistant.requests.post") as post:
        reply = ask_assistant("hello", settings=Settings(assistant_api_key=""))
    post.assert_not_called()
    assert reply.success is False
    assert reply.response == FALLBACK_RESPONSE
    assert "not configured" in reply.error


@pytest.mark.parametrize(
    "response",
    [
        Mock(status_code=429, json=Mock(return_value={})),
        Mock(status_code=200, json=Mock(side_effect=ValueError("no json"))),
        Mock(status_code=200, json=Mock(return_value={"candidates": []})),
        Mock(status_code=200, json=Mock(return_value={"candidates": [{"content": {"parts": [{"text": "  "}]}}]})),
    ],
)
def test_bad_responses_fall_back(settings, response):
    with patch("assistant.requests.post", return_value=response):
        reply = ask_assistant("hello", settings=settings)
    assert reply.success is False
    assert reply.response == FALLBACK_RESPONSE
    assert reply.error


def test_network_error_falls_back(settings):
    with patch("assistant.requests.post", side_effect=requests.ConnectionError("down")):
        reply = ask_assistant("hello", settings=settings)
    assert reply.success is False
    assert reply.response == FALLBACK_RESPONSE
    assert "ConnectionError" in reply.error
