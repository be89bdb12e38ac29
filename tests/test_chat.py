"""Tests for study_assistant.tools.chat."""
from types import SimpleNamespace

from study_assistant.models.state import ChatMessage
from study_assistant.models.subject import Subject
from study_assistant.tools import chat
from study_assistant.tools.tutor import USAGE_HINT


class _FakeModels:
    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.calls = []

    def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return SimpleNamespace(text=self.text)


def _install_fake_client(monkeypatch, models: _FakeModels) -> None:
    monkeypatch.setattr(chat.genai, "Client", lambda api_key: SimpleNamespace(models=models))


def test_offline_without_api_key(monkeypatch) -> None:
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    reply = chat.chat_reply([ChatMessage(role="user", text="quiz graphs")])
    assert reply.startswith("1) Define graphs")


def test_empty_conversation_gets_hint(monkeypatch) -> None:
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    assert chat.chat_reply([]) == USAGE_HINT


def test_uses_gemini_with_api_key(monkeypatch) -> None:
    models = _FakeModels(text="  Sure, here is a plan.  ")
    _install_fake_client(monkeypatch, models)
    messages = [
        ChatMessage(role="assistant", text="Hi!"),
        ChatMessage(role="user", text="How do I start?"),
    ]

    reply = chat.chat_reply(messages, api_key="test-key")

    assert reply == "Sure, here is a plan."
    call = models.calls[0]
    assert call["model"] == chat.CHAT_MODEL
    assert [c.role for c in call["contents"]] == ["model", "user"]
    assert call["config"].temperature == 0.4


def test_falls_back_when_request_fails(monkeypatch) -> None:
    models = _FakeModels(error=RuntimeError("quota exceeded"))
    _install_fake_client(monkeypatch, models)

    reply = chat.chat_reply(
        [ChatMessage(role="user", text="systems review")],
        [Subject(name="Systems")],
        api_key="test-key",
    )
    assert reply.startswith("For systems:")
