from __future__ import annotations

import json
import logging

import pytest

from aaa_audit.agents.alt_text_agent import AltTextGenerator
from aaa_audit.agents.simplifier_agent import TextSimplifier
from aaa_audit.agents.transcriber_agent import Transcriber
from aaa_audit.app.errors import ConfigError, ProviderError
from aaa_audit.app.logging import JsonFormatter
from aaa_audit.app.settings import load_settings
from aaa_audit.tools.templates import (
    AUDIO_TRANSCRIPT_TEMPLATES,
    VIDEO_TRANSCRIPT_TEMPLATES,
    TemplateBank,
    fixed_selector,
)


class FakeMediaClient:
    def __init__(self, reply: str = "", fail: bool = False):
        self.reply = reply
        self.fail = fail
        self.calls = []

    def _answer(self, **kwargs):
        self.calls.append(kwargs)
        if self.fail:
            raise ProviderError("quota exceeded")
        return self.reply

    def describe_image(self, *, data, mime_type, prompt):
        return self._answer(data=data, mime_type=mime_type, prompt=prompt)

    def transcribe_audio(self, *, data, mime_type, prompt):
        return self._answer(data=data, mime_type=mime_type, prompt=prompt)


class FakeLLM:
    def __init__(self, reply: str = "", fail: bool = False):
        self.reply = reply
        self.fail = fail
        self.messages = None

    def chat(self, *, messages, **kwargs):
        self.messages = messages
        if self.fail:
            raise ProviderError("timeout")
        return self.reply


def _transcriber(client):
    return Transcriber(
        client,
        TemplateBank(AUDIO_TRANSCRIPT_TEMPLATES, fixed_selector(1)),
        TemplateBank(VIDEO_TRANSCRIPT_TEMPLATES, fixed_selector(2)),
    )


def test_alt_text_from_vision_model(banks):
    client = FakeMediaClient(reply='"Golden retriever running on a beach"\n')
    result = AltTextGenerator(client, banks).generate(data=b"img", mime_type="image/png", filename="dog.png")
    assert result.alt_text == "Golden retriever running on a beach"
    assert result.source == "gemini"
    assert result.length == len(result.alt_text)
    assert "125" in client.calls[0]["prompt"]


def test_alt_text_falls_back_when_model_fails(banks):
    client = FakeMediaClient(fail=True)
    result = AltTextGenerator(client, banks).generate(data=b"img", mime_type="image/png", filename="blue-car.png")
    assert result.source == "template"
    assert result.alt_text.startswith("Blue Car")
    assert result.notes == "vision model failed"


def test_simplifier_uses_llm_and_rescores():
    llm = FakeLLM(reply="We use the form. It is short.")
    result = TextSimplifier(llm).simplify("We utilize the form, which is brief.", "grade5")
    assert result.source == "cerebras"
    assert result.text == "We use the form. It is short."
    assert result.reading_level == "grade5"
    assert "grade5" in llm.messages[0]["content"]
    assert llm.messages[1] == {"role": "user", "content": "We utilize the form, which is brief."}


def test_simplifier_falls_back_on_error_or_empty_reply():
    assert TextSimplifier(FakeLLM(fail=True)).simplify("Utilize it.").source == "dictionary"
    assert TextSimplifier(FakeLLM(reply="")).simplify("Utilize it.").text == "use it."


def test_transcriber_audio_via_model():
    client = FakeMediaClient(reply="hello world")
    result = _transcriber(client).transcribe(data=b"a", mime_type="audio/mpeg", media_type="audio", filename="a.mp3")
    assert (result.text, result.source) == ("hello world", "gemini")


def test_transcriber_video_always_uses_template():
    client = FakeMediaClient(reply="unused")
    result = _transcriber(client).transcribe(data=b"v", mime_type="video/mp4", media_type="video", filename="v.mp4")
    assert result.source == "template"
    assert result.text == VIDEO_TRANSCRIPT_TEMPLATES[2]
    assert client.calls == []


def test_transcriber_audio_fallback():
    result = _transcriber(FakeMediaClient(fail=True)).transcribe(
        data=b"a", mime_type="audio/wav", media_type="audio", filename="a.wav"
    )
    assert result.text == AUDIO_TRANSCRIPT_TEMPLATES[1]
    assert result.notes == "speech model failed"


def test_load_settings_from_env(monkeypatch):
    monkeypatch.setenv("CONFORMANCE_LEVEL", "aa")
    monkeypatch.setenv("MAX_IMAGE_MB", "2")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("MONGO_TLS", "yes")
    monkeypatch.delenv("MONGO_URI", raising=False)
    s = load_settings()
    assert s.conformance_level == "AA"
    assert s.max_image_bytes == 2 * 1024 * 1024
    assert s.cors_origins == ["http://a.test", "http://b.test"]
    assert s.mongo_tls is True
    assert s.mongo_uri is None


def test_load_settings_rejects_bad_values(monkeypatch):
    monkeypatch.setenv("CONFORMANCE_LEVEL", "A")
    with pytest.raises(ConfigError):
        load_settings()

    monkeypatch.setenv("CONFORMANCE_LEVEL", "AAA")
    monkeypatch.setenv("PORT", "eighty")
    with pytest.raises(ConfigError):
        load_settings()


def test_json_formatter_includes_ctx():
    record = logging.LogRecord("aaa_audit.test", logging.INFO, __file__, 1, "Stored %s", ("report",), None)
    record.ctx = {"content_hash": "abc"}
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "Stored report"
    assert payload["level"] == "INFO"
    assert payload["ctx"] == {"content_hash": "abc"}
