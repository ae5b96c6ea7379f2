from __future__ import annotations

from typing import Dict, Optional

from bs4 import BeautifulSoup, Tag


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or "", "html.parser")


def parse_style(style: Optional[str]) -> Dict[str, str]:
    """Inline `style` attribute -> {property: value}, lower-cased property names."""
    out: Dict[str, str] = {}
    if not style:
        return out
    for decl in style.split(";"):
        if ":" not in decl:
            continue
        prop, value = decl.split(":", 1)
        prop = prop.strip().lower()
        value = value.strip()
        if prop and value:
            out[prop] = value
    return out


def class_string(el: Tag) -> str:
    classes = el.get("class") or []
    if isinstance(classes, str):
        return classes
    return " ".join(classes)


def describe(el: Tag) -> str:
    """Short CSS-like label, e.g. `p#intro.lead`."""
    label = el.name
    el_id = el.get("id")
    if el_id:
        label += f"#{el_id}"
    classes = class_string(el).split()
    if classes:
        label += "." + ".".join(classes)
    return label


def truncate(markup: str, limit: int = 100) -> str:
    return markup[:limit] + ("..." if len(markup) > limit else "")


def add_attributes(markup: str, tag: str, attrs: str) -> str:
    """Insert `attrs` into the first `<tag` opening of markup."""
    return markup.replace(f"<{tag}", f"<{tag} {attrs}", 1)


def text_of(el: Tag) -> str:
    return el.get_text(" ", strip=True)
