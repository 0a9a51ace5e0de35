"""
Tests for the /api/chat endpoint
"""

import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

from mediachat.main import app
from mediachat.models import ProviderMessage

CHAT_COMPLETION = "mediachat.handlers.chat_handler.chat_completion"


@pytest.fixture
def client():
    return TestClient(app)


class TestChatEndpoint:
    """Test request relay and error mapping"""

    def test_text_message_returns_reply(self, client, override_settings):
        """A plain text conversation is relayed and the reply returned"""
        override_settings()
        with patch(CHAT_COMPLETION, return_value=("hi there", {"model": "gpt-4o"})) as mock_completion:
            response = client.post("/api/chat", json={"messages": [{"role": "user", "content": "hello"}]})

        assert response.status_code == 200
        assert response.json() == {"reply": "hi there"}
        mock_completion.assert_called_once()
        sent = mock_completion.call_args.args[0]
        assert sent == [ProviderMessage(role="user", content="hello")]

    def test_image_message_is_sent_as_parts(self, client, override_settings):
        """An image-only message becomes a single image part"""
        override_settings()
        image = "data:image/png;base64,AAA"
        with patch(CHAT_COMPLETION, return_value=("a cat", {})) as mock_completion:
            response = client.post(
                "/api/chat",
                json={"messages": [{"role": "user", "content": "", "images": [image]}]},
            )

        assert response.status_code == 200
        sent = mock_completion.call_args.args[0]
        assert sent[0].model_dump()["content"] == [{"type": "image_url", "image_url": {"url": image}}]

    def test_injected_settings_reach_the_provider(self, client, override_settings):
        """The settings whose credential was checked are the ones used for the call"""
        settings = override_settings(openai_api_key="sk-override")
        with patch(CHAT_COMPLETION, return_value=("ok", {})) as mock_completion:
            response = client.post("/api/chat", json={"messages": [{"role": "user", "content": "hello"}]})

        assert response.status_code == 200
        assert mock_completion.call_args.args[1] is settings

    def test_missing_api_key(self, client, override_settings):
        """A missing credential is a 500 and the provider is never called"""
        override_settings(openai_api_key="")
        with patch(CHAT_COMPLETION) as mock_completion:
            response = client.post("/api/chat", json={"messages": [{"role": "user", "content": "hello"}]})

        assert response.status_code == 500
        assert response.json() == {"error": "Missing OpenAI API key"}
        assert mock_completion.call_count == 0

    def test_missing_api_key_wins_over_bad_payload(self, client, override_settings):
        """The credential is checked before the body is read"""
        override_settings(openai_api_key="")
        with patch(CHAT_COMPLETION) as mock_completion:
            response = client.post("/api/chat", json={"messages": "nope"})

        assert response.status_code == 500
        assert mock_completion.call_count == 0

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"messages": None},
            {"messages": "hello"},
            {"messages": 3},
            {"messages": []},
            [{"role": "user", "content": "hello"}],
        ],
    )
    def test_invalid_payload(self, client, override_settings, body):
        """Malformed bodies are a 400 with no provider call"""
        override_settings()
        with patch(CHAT_COMPLETION) as mock_completion:
            response = client.post("/api/chat", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid payload"}
        assert mock_completion.call_count == 0

    def test_non_json_body(self, client, override_settings):
        """A body that is not JSON is a 400"""
        override_settings()
        with patch(CHAT_COMPLETION) as mock_completion:
            response = client.post(
                "/api/chat",
                content=b"not json",
                headers={"Content-Type": "application/json"},
            )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid payload"}
        assert mock_completion.call_count == 0

    def test_provider_failure_message_is_passed_through(self, client, override_settings):
        """Any provider exception becomes a 500 carrying its message"""
        override_settings()
        with patch(CHAT_COMPLETION, side_effect=RuntimeError("Rate limit reached")):
            response = client.post("/api/chat", json={"messages": [{"role": "user", "content": "hello"}]})

        assert response.status_code == 500
        assert response.json() == {"error": "Rate limit reached"}

    def test_provider_failure_without_message(self, client, override_settings):
        """An exception with no text still yields an error body"""
        override_settings()
        with patch(CHAT_COMPLETION, side_effect=RuntimeError()):
            response = client.post("/api/chat", json={"messages": [{"role": "user", "content": "hello"}]})

        assert response.status_code == 500
        assert response.json() == {"error": "Error"}

    def test_empty_reply(self, client, override_settings):
        """A provider with no answer yields an empty reply"""
        override_settings()
        with patch(CHAT_COMPLETION, return_value=("", {})):
            response = client.post("/api/chat", json={"messages": [{"role": "user", "content": "hello"}]})

        assert response.status_code == 200
        assert response.json() == {"reply": ""}

    def test_healthz(self, client):
        """Health check answers without configuration"""
        response = client.get("/healthz")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
