from __future__ import annotations

from pydantic import BaseModel, Field
from typing import Literal


Source = Literal["gemini", "cerebras", "template", "dictionary"]


class GeneratedAltText(BaseModel):
    alt_text: str
    source: Source = "template"
    length: int = 0
    notes: str = ""


class SimplifiedText(BaseModel):
    text: str
    reading_level: str
    source: Source = "dictionary"


class Transcript(BaseModel):
    text: str
    media_type: Literal["audio", "video"]
    source: Source = "template"
    notes: str = Field(default="")
