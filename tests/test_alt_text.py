from __future__ import annotations

from aaa_audit.tools.checks.alt_text import (
    analyze_alt_text_quality,
    analyze_images,
    is_decorative_image,
    subject_from_filename,
    template_alt_text,
)
from aaa_audit.tools.checks.dom import parse_html


def test_subject_from_filename():
    assert subject_from_filename("red-sports_car.jpg") == "Red Sports Car"
    assert subject_from_filename("/static/img/HeroBanner.png") == "Hero Banner"
    assert subject_from_filename("a.png") == ""


def test_template_alt_text_uses_subject_or_generic(banks):
    assert template_alt_text("red-sports_car.jpg", banks) == "Red Sports Car displayed prominently against a clean background"
    assert template_alt_text("x.jpg", banks) == "Product image showing details and features"


def test_decorative_detection():
    soup = parse_html(
        '<img src="a.jpg" width="16">'
        '<img src="b.jpg" class="divider">'
        '<img src="c.jpg" role="presentation">'
        '<img src="d.jpg" aria-hidden="true">'
        '<img src="/img/spacer.gif">'
        '<img src="photo.jpg" width="640">'
    )
    flags = [is_decorative_image(img) for img in soup.find_all("img")]
    assert flags == [True, True, True, True, True, False]


def test_analyze_images_returns_only_flagged(banks):
    html = (
        '<img src="team-photo.jpg">'
        '<img src="icon-star.png" alt="star">'
        '<img src="chart.jpg" alt="">'
        '<img src="harbour.jpg" alt="A quiet harbour at dawn">'
    )
    out = analyze_images(html, banks)
    assert out["totalImages"] == 4
    assert out["issuesFound"] == 3

    missing, decorative, empty = out["images"]
    assert missing["imageId"] == 1
    assert missing["hasAlt"] is False
    assert missing["suggestedAlt"] == "Team Photo displayed prominently against a clean background"

    assert decorative["isLikelyDecorative"] is True
    assert decorative["suggestedAlt"] == ""

    assert empty["isEmpty"] is True
    assert empty["isLikelyDecorative"] is False


def test_quality_excellent():
    out = analyze_alt_text_quality("A golden retriever catching a frisbee in a park")
    assert out == {"score": 100, "quality": "excellent", "issues": [], "suggestions": []}


def test_quality_penalties_stack_and_floor():
    out = analyze_alt_text_quality("image of a dog.jpg")
    assert out["score"] == 10
    assert out["quality"] == "poor"
    assert 'Consider: "a dog.jpg"' in out["suggestions"]
    assert 'Consider: "image of a dog"' in out["suggestions"]

    worst = analyze_alt_text_quality("Picture of photo.png " + "x" * 130)
    assert worst["score"] == 0


def test_quality_empty_and_short():
    assert analyze_alt_text_quality("")["score"] == 50
    short = analyze_alt_text_quality("dog")
    assert short["issues"] == ["Alt text is too short"]
    assert short["quality"] == "poor"


def test_quality_context_relevance():
    out = analyze_alt_text_quality(
        "Sunset over mountain range with clouds",
        image_context="Quarterly revenue chart for the finance team",
    )
    assert "Alt text may not be relevant to the surrounding content" in out["issues"]
    assert out["score"] == 85


def test_quality_respects_max_length():
    text = "A" * 90
    assert analyze_alt_text_quality(text)["issues"] == []
    assert analyze_alt_text_quality(text, max_length=80)["score"] == 80
