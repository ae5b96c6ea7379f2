from __future__ import annotations

import pytest

from aaa_audit.tools.media.captions import DEFAULT_CUES, Cue, caption_track, to_webvtt
from aaa_audit.tools.media.guidance import media_issues, sign_language_guidance
from aaa_audit.tools.media.kinds import AUDIO, IMAGE, VIDEO, media_kind, upload_folder
from aaa_audit.tools.templates import TemplateBank, fixed_selector, random_selector


def test_template_bank_requires_templates():
    with pytest.raises(ValueError):
        TemplateBank([])


def test_fixed_selector_wraps():
    bank = TemplateBank(["a {x}", "b {x}"], fixed_selector(3))
    assert bank.pick(x="1") == "b 1"
    assert len(bank) == 2


def test_out_of_range_selector_is_rejected():
    bank = TemplateBank(["only"], lambda n: n)
    with pytest.raises(IndexError):
        bank.pick()


def test_seeded_selector_is_reproducible():
    templates = [str(i) for i in range(10)]
    a = TemplateBank(templates, random_selector(42))
    b = TemplateBank(templates, random_selector(42))
    assert [a.pick() for _ in range(5)] == [b.pick() for _ in range(5)]


@pytest.mark.parametrize(
    "mimetype,kind,folder",
    [
        ("image/png", IMAGE, "images"),
        ("audio/mpeg", AUDIO, "audio"),
        ("video/mp4", VIDEO, "video"),
        ("application/pdf", None, "other"),
        (None, None, "other"),
    ],
)
def test_media_kinds(mimetype, kind, folder):
    assert media_kind(mimetype) == kind
    assert upload_folder(mimetype) == folder


def test_caption_track_shape():
    track = caption_track()
    assert len(track) == len(DEFAULT_CUES)
    assert track[0] == {"start": "00:00:00", "end": "00:00:05", "text": DEFAULT_CUES[0].text}


def test_webvtt_rendering():
    vtt = to_webvtt([Cue("00:00:01", "00:00:02", "Hello"), Cue("00:00:03", "00:00:04", "World")])
    assert vtt.split("\n") == [
        "WEBVTT",
        "",
        "1",
        "00:00:01.000 --> 00:00:02.000",
        "Hello",
        "",
        "2",
        "00:00:03.000 --> 00:00:04.000",
        "World",
        "",
    ]


def test_media_issues_by_kind():
    assert [i["id"] for i in media_issues(AUDIO)] == ["transcript"]
    video = media_issues(VIDEO)
    assert [i["id"] for i in video] == [
        "transcript",
        "captions",
        "audio-description",
        "sign-language",
        "extended-audio-description",
        "media-alternative",
    ]
    assert all(i["severity"] == "error" for i in video)


def test_sign_language_guidance():
    assert sign_language_guidance()["required"] is True
    assert len(sign_language_guidance()["options"]) == 2
    assert sign_language_guidance(has_speech=False)["options"] == []
