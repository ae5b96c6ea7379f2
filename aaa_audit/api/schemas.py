from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional

from aaa_audit.app.errors import InvalidRequestError


class _Body(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# Fields default to empty so a missing value gets the endpoint's own 400 message.

class HtmlBody(_Body):
    html: str = ""


class ContrastAnalyzeBody(HtmlBody):
    level: Optional[str] = None


class ColorPairBody(_Body):
    foreground: str = ""
    background: str = ""


class ContrastSuggestBody(ColorPairBody):
    required: float = Field(default=7.0, gt=0)


class AltTextCheckBody(_Body):
    alt_text: str = Field(default="", alias="altText")
    image_context: Optional[str] = Field(default=None, alias="imageContext")


class AriaFixBody(HtmlBody):
    issue_id: Optional[str] = Field(default=None, alias="issueId")


class TextBody(_Body):
    text: str = ""


class SimplifyBody(TextBody):
    target_reading_level: str = Field(default="grade6", alias="targetReadingLevel")


class AuditBody(_Body):
    html: str = ""
    text: str = ""
    title: str = ""
    level: Optional[str] = None
    remediate: bool = True
    store: bool = False


class ReportBody(_Body):
    report: Dict[str, Any] = Field(default_factory=dict)


def require(value: Optional[str], message: str) -> str:
    if value is None or not str(value).strip():
        raise InvalidRequestError(message)
    return value
