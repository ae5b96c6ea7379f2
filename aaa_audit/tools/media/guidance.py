from __future__ import annotations

from typing import Any, Dict, List

from aaa_audit.tools.media.kinds import VIDEO

SIGN_LANGUAGE_REQUIRED = (
    "This video contains speech and requires sign language interpretation for WCAG 2.1 AAA compliance."
)
SIGN_LANGUAGE_NOT_REQUIRED = (
    "This video does not contain speech, so sign language interpretation is not required."
)


def sign_language_guidance(has_speech: bool = True) -> Dict[str, Any]:
    # speech detection is not attempted; callers assume speech
    return {
        "required": has_speech,
        "message": SIGN_LANGUAGE_REQUIRED if has_speech else SIGN_LANGUAGE_NOT_REQUIRED,
        "options": [
            {"id": "option-1", "name": "Add sign language video overlay"},
            {"id": "option-2", "name": "Provide separate sign language version"},
        ]
        if has_speech
        else [],
    }


def _media_issue(issue_id: str, kind: str, issue: str, criteria: str, remediation: str) -> Dict[str, Any]:
    return {
        "id": issue_id,
        "type": kind,
        "issue": issue,
        "wcagCriteria": criteria,
        "severity": "error",
        "remediation": remediation,
    }


def media_issues(kind: str) -> List[Dict[str, Any]]:
    """Alternatives a prerecorded audio or video file still needs."""
    issues = [
        _media_issue(
            "transcript", kind,
            f"No transcript provided for {kind} content",
            "1.2.1 Audio-only and Video-only (Prerecorded)",
            "Generate and provide a transcript for the media content",
        )
    ]
    if kind != VIDEO:
        return issues

    issues.extend(
        [
            _media_issue(
                "captions", VIDEO, "No captions provided for video content",
                "1.2.2 Captions (Prerecorded)",
                "Generate and provide synchronized captions for the video",
            ),
            _media_issue(
                "audio-description", VIDEO, "No audio description provided for video content",
                "1.2.3 Audio Description or Media Alternative (Prerecorded)",
                "Generate and provide audio descriptions for visual information in the video",
            ),
            _media_issue(
                "sign-language", VIDEO, "No sign language interpretation provided for video content",
                "1.2.6 Sign Language (Prerecorded)",
                "Provide sign language interpretation for the audio content in the video",
            ),
            _media_issue(
                "extended-audio-description", VIDEO, "No extended audio description provided for video content",
                "1.2.7 Extended Audio Description (Prerecorded)",
                "Provide extended audio descriptions for visual information in the video",
            ),
            _media_issue(
                "media-alternative", VIDEO, "No media alternative provided for video content",
                "1.2.8 Media Alternative (Prerecorded)",
                "Provide a text alternative for the entire video content",
            ),
        ]
    )
    return issues

