from __future__ import annotations

from fastapi.testclient import TestClient

from aaa_audit.api.app import create_app
from aaa_audit.api.deps import build_services
from aaa_audit.tools.templates import fixed_selector

MB = 1024 * 1024

LOW_CONTRAST_PAGE = '<p style="color:#777777">Low contrast text here.</p>'


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"
    assert "timestamp" in res.json()


# contrast

def test_contrast_suggest(client):
    res = client.post("/api/contrast/suggest", json={"foreground": "#777777", "background": "#FFFFFF"})
    assert res.status_code == 200
    body = res.json()
    assert body["original"]["ratio"] == 4.48
    assert body["improved"]["foreground"] == "#515151"
    assert body["required"] == 7.0
    assert body["passes"] is True


def test_contrast_suggest_missing_and_invalid(client):
    res = client.post("/api/contrast/suggest", json={"foreground": "#777777"})
    assert res.status_code == 400
    assert res.json() == {"error": "Foreground and background colors are required"}

    res = client.post("/api/contrast/suggest", json={"foreground": "grey", "background": "#fff"})
    assert res.status_code == 400


def test_contrast_check_and_analyze(client):
    res = client.post("/api/contrast/check", json={"foreground": "#000000", "background": "#ffffff"})
    assert res.json()["ratio"] == 21.0
    assert res.json()["passesAAA"] is True

    res = client.post("/api/contrast/analyze", json={"html": LOW_CONTRAST_PAGE, "level": "AA"})
    assert res.status_code == 200
    assert res.json()["issues"][0]["required"] == 4.5

    assert client.post("/api/contrast/analyze", json={}).json() == {"error": "HTML content is required"}


def test_body_type_errors_are_400(client):
    res = client.post("/api/contrast/suggest", json={"foreground": "#000", "background": "#fff", "required": 0})
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid request body"


def test_suggest_accepts_ratio_above_21(client):
    res = client.post("/api/contrast/suggest", json={"foreground": "#777777", "background": "#FFFFFF", "required": 22})
    assert res.status_code == 200
    body = res.json()
    assert body["passes"] is False
    assert body["improved"]["foreground"] == "#000000"


# alt text

def test_alt_text_generate_uses_template_without_vision_model(client):
    res = client.post(
        "/api/alt-text/generate",
        files={"image": ("red-sports_car.jpg", b"\xff\xd8\xff\xe0fake", "image/jpeg")},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["source"] == "template"
    assert body["altText"] == "Red Sports Car displayed prominently against a clean background"
    assert body["image"]["originalName"] == "red-sports_car.jpg"
    assert body["image"]["url"].startswith("/uploads/images/")


def test_alt_text_generate_rejects_bad_uploads(client):
    assert client.post("/api/alt-text/generate").json() == {"error": "No image file provided"}

    res = client.post("/api/alt-text/generate", files={"image": ("notes.txt", b"hi", "text/plain")})
    assert res.status_code == 400

    res = client.post("/api/alt-text/generate", files={"image": ("big.png", b"x" * (MB + 1), "image/png")})
    assert res.status_code == 400
    assert res.json()["error"] == "File too large"


def test_alt_text_analyze_and_check(client):
    res = client.post("/api/alt-text/analyze", json={"html": '<img src="a.jpg"><img src="b.jpg" alt="A red bicycle">'})
    assert res.json()["totalImages"] == 2
    assert res.json()["issuesFound"] == 1

    res = client.post("/api/alt-text/check", json={"altText": "picture of a cat"})
    assert res.json()["altText"] == "picture of a cat"
    assert res.json()["analysis"]["score"] == 50

    assert client.post("/api/alt-text/check", json={}).json() == {"error": "Alt text is required"}


# aria

def test_aria_validate_and_fix(client):
    html = '<div role="button">Go</div><section><p>x</p></section>'
    res = client.post("/api/aria/validate", json={"html": html})
    assert res.json()["totalIssues"] == 2

    res = client.post("/api/aria/fix", json={"html": html, "issueId": "aria-button-1"})
    [fix] = res.json()["fixes"]
    assert fix["id"] == "aria-button-1"
    assert "tabindex" in fix["suggestedCode"]

    res = client.post("/api/aria/fix", json={"html": html})
    assert len(res.json()["fixes"]) == 2

    res = client.post("/api/aria/fix", json={"html": html, "issueId": "nope"})
    assert res.status_code == 404
    assert res.json() == {"error": "Issue with ID nope not found"}


def test_aria_status_and_semantic_structure(client):
    res = client.post("/api/aria/status-messages", json={"html": '<div class="toast">Saved</div>'})
    assert res.json()["totalIssues"] == 1

    res = client.post("/api/aria/semantic-structure", json={"html": "<h1>A</h1><h4>B</h4>"})
    body = res.json()
    assert body["totalIssues"] == 1
    assert body["headingStructure"]["hasSkippedLevels"] is True
    assert body["landmarkRegions"]["hasProperStructure"] is False

    assert client.post("/api/aria/validate", json={"html": " "}).status_code == 400


# text

def test_text_simplify_falls_back_to_dictionary(client):
    res = client.post("/api/text/simplify", json={"text": "Please utilize the form.", "targetReadingLevel": "grade5"})
    body = res.json()
    assert body["simplified"] == {"text": "Please use the form.", "readingLevel": "grade6", "source": "dictionary"}
    assert body["targetReadingLevel"] == "grade5"
    assert body["original"]["text"] == "Please utilize the form."


def test_text_analysis_endpoints(client):
    text = "The WCAG guide is ubiquitous. I read it."
    assert client.post("/api/text/analyze-readability", json={"text": text}).json()["meetsWcagAAA"] in (True, False)
    assert client.post("/api/text/unusual-words", json={"text": text}).json()["unusualWords"][0]["word"] == "ubiquitous"
    assert client.post("/api/text/abbreviations", json={"text": text}).json()["abbreviations"][0]["abbreviation"] == "WCAG"
    assert client.post("/api/text/pronunciation", json={"text": text}).json()["pronunciationGuidance"][0]["word"] == "read"

    res = client.post("/api/text/unusual-words", json={"text": ""})
    assert res.status_code == 400
    assert res.json() == {"error": "Text content is required"}


# media

def test_generate_transcript_for_audio(client):
    res = client.post("/api/media/generate-transcript", files={"media": ("talk.mp3", b"ID3fake", "audio/mpeg")})
    body = res.json()
    assert body["success"] is True
    assert body["source"] == "template"
    assert body["media"]["type"] == "audio"
    assert body["transcript"].startswith("Welcome to our accessibility tool.")


def test_media_endpoints_reject_images(client):
    res = client.post("/api/media/generate-transcript", files={"media": ("pic.png", b"x", "image/png")})
    assert res.status_code == 400
    assert client.post("/api/media/analyze").json() == {"error": "No media file provided"}


def test_captions_json_and_webvtt(client):
    video = {"video": ("clip.mp4", b"\x00\x00\x00\x18ftyp", "video/mp4")}
    res = client.post("/api/media/generate-captions", files=video)
    assert len(res.json()["captions"]) == 12

    res = client.post("/api/media/generate-captions?format=vtt", files=video)
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/vtt")
    assert res.text.startswith("WEBVTT\n\n1\n00:00:00.000 --> 00:00:05.000")


def test_video_guidance_endpoints(client):
    video = {"video": ("clip.mp4", b"0000", "video/mp4")}
    assert len(client.post("/api/media/audio-description", files=video).json()["audioDescriptions"]) == 5
    assert client.post("/api/media/sign-language", files=video).json()["signLanguage"]["required"] is True

    res = client.post("/api/media/analyze", files={"media": ("clip.mp4", b"0000", "video/mp4")})
    assert len(res.json()["issues"]) == 6


# uploads

def test_upload_and_serve(client):
    res = client.post("/api/upload", files={"file": ("logo.png", b"PNGDATA", "image/png")})
    assert res.status_code == 200
    stored = res.json()["file"]
    assert stored["size"] == 7
    assert stored["url"].startswith("/uploads/images/")
    assert stored["filename"].endswith("-logo.png")

    served = client.get(stored["url"])
    assert served.status_code == 200
    assert served.content == b"PNGDATA"


def test_upload_multiple(client):
    files = [
        ("files", ("a.png", b"1", "image/png")),
        ("files", ("b.mp3", b"2", "audio/mpeg")),
        ("files", ("c.pdf", b"3", "application/pdf")),
    ]
    res = client.post("/api/upload/multiple", files=files)
    urls = [f["url"] for f in res.json()["files"]]
    assert [u.split("/")[2] for u in urls] == ["images", "audio", "other"]

    too_many = [("files", (f"{i}.png", b"x", "image/png")) for i in range(11)]
    assert client.post("/api/upload/multiple", files=too_many).status_code == 400
    assert client.post("/api/upload").json() == {"error": "No file uploaded"}


# audit + reports

def test_audit_without_storage(client):
    res = client.post("/api/audit", json={"html": LOW_CONTRAST_PAGE, "title": "Page"})
    assert res.status_code == 200
    report = res.json()["report"]
    assert report["status"] == "FAIL"
    assert report["title"] == "Page"
    assert "storage" not in res.json()

    assert client.post("/api/audit", json={}).status_code == 400


def test_audit_store_fetch_and_verify(client):
    res = client.post("/api/audit", json={"text": "The cat sat on the mat.", "store": True})
    body = res.json()
    assert body["storage"]["created"] is True
    content_hash = body["storage"]["contentHash"]

    fetched = client.get(f"/api/reports/{content_hash}").json()
    assert fetched["report"] == body["report"]
    assert fetched["status"] == "PASS"

    listed = client.get("/api/reports", params={"limit": 5}).json()["reports"]
    assert [r["contentHash"] for r in listed] == [content_hash]

    ok = client.post(f"/api/reports/{content_hash}/verify", json={"report": body["report"]}).json()
    assert ok["verified"] is True

    tampered = {**body["report"], "status": "FAIL"}
    bad = client.post(f"/api/reports/{content_hash}/verify", json={"report": tampered}).json()
    assert bad["verified"] is False

    assert client.get("/api/reports/" + "0" * 64).status_code == 404


def test_store_report_directly(client):
    res = client.post("/api/reports", json={"report": {"title": "Manual", "status": "PASS"}})
    assert res.json()["created"] is True
    again = client.post("/api/reports", json={"report": {"status": "PASS", "title": "Manual"}})
    assert again.json()["created"] is False
    assert client.post("/api/reports", json={"report": {}}).status_code == 400


def test_reports_unavailable_without_storage(settings):
    services = build_services(settings, fixed_selector(0))
    client = TestClient(create_app(services))
    assert client.get("/api/reports").status_code == 503
    assert client.post("/api/audit", json={"text": "Hi there.", "store": True}).status_code == 503
