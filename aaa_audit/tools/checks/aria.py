from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup, Tag

from aaa_audit.core.utils import dedupe
from aaa_audit.tools.checks.dom import add_attributes, class_string, parse_html, text_of, truncate

logger = logging.getLogger(__name__)

NAME_ROLE_VALUE = "4.1.2 Name, Role, Value (A)"
INFO_AND_RELATIONSHIPS = "1.3.1 Info and Relationships (A)"
STATUS_MESSAGES = "4.1.3 Status Messages (AA)"

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
INTERACTIVE_TAGS = ["button", "a", "input", "select", "textarea"]
KEYBOARD_HANDLERS = ("onkeydown", "onkeyup", "onkeypress")
STATUS_CLASSES = ("status", "message", "alert", "notification", "toast")
LIVE_ROLES = {"status", "alert", "log"}

# tags that already expose a role without an explicit attribute
IMPLICIT_ROLE_TAGS = {
    "article", "aside", "button", "footer", "form", "header", "img", "input",
    "li", "main", "nav", "ol", "section", "select", "table", "textarea", "ul",
    *HEADING_TAGS,
}


def _issue(
    issue_id: str,
    element: str,
    message: str,
    code: str,
    suggestion: str,
    severity: str,
    criteria: str,
) -> Dict[str, Any]:
    return {
        "id": issue_id,
        "element": element,
        "issue": message,
        "code": code,
        "suggestion": suggestion,
        "severity": severity,
        "wcagCriteria": criteria,
    }


def _opening_tag_end(markup: str) -> int:
    return markup.index(">")


def has_implicit_role(el: Tag) -> bool:
    if el.name == "a":
        return el.has_attr("href")
    return el.name in IMPLICIT_ROLE_TAGS


def _has_aria_attribute(el: Tag) -> bool:
    return any(name.startswith("aria-") for name in el.attrs)


def _has_label_for(soup: BeautifulSoup, el: Tag) -> bool:
    el_id = el.get("id")
    if not el_id:
        return False
    return soup.find("label", attrs={"for": el_id}) is not None


def has_accessible_name(soup: BeautifulSoup, el: Tag) -> bool:
    if el.has_attr("aria-label") or el.has_attr("aria-labelledby"):
        return True
    if el.name == "input":
        if el.has_attr("title"):
            return True
        if el.has_attr("alt") and el.get("type") == "image":
            return True
    if el.name in {"input", "select", "textarea"} and _has_label_for(soup, el):
        return True
    return text_of(el) != ""


def suggest_role(el: Tag) -> str:
    if el.has_attr("aria-expanded") or el.has_attr("aria-pressed"):
        role = "button"
    elif el.has_attr("aria-selected"):
        role = "option"
    elif el.has_attr("aria-checked"):
        role = "checkbox"
    else:
        role = "group"

    markup = str(el)
    end = _opening_tag_end(markup)
    return f'{markup[:end]} role="{role}"{markup[end:]}'


def suggest_accessible_name(el: Tag, index: int) -> str:
    markup = str(el)
    if el.name in {"button", "a"}:
        return add_attributes(markup, el.name, f'aria-label="Purpose of this {el.name}"')
    if el.name == "input":
        input_type = el.get("type") or "text"
        input_id = el.get("id") or f"{input_type}-{index}"
        if not el.has_attr("id"):
            markup = add_attributes(markup, "input", f'id="{input_id}"')
        return f'<label for="{input_id}">{input_type[:1].upper() + input_type[1:]}</label>\n{markup}'
    return markup


def suggest_section_heading(section: Tag, index: int) -> str:
    markup = str(section)
    end = _opening_tag_end(markup) + 1
    heading_id = f"section-heading-{index}"
    opening = add_attributes(markup[:end], "section", f'aria-labelledby="{heading_id}"')
    return f'{opening}\n  <h2 id="{heading_id}">Section Heading</h2>\n  {markup[end:]}'


def suggest_status_fix(el: Tag) -> str:
    classes = class_string(el)
    role, live = "status", "polite"
    if "alert" in classes or "error" in classes:
        role, live = "alert", "assertive"
    elif "log" in classes:
        role = "log"
    return add_attributes(str(el), el.name, f'role="{role}" aria-live="{live}"')


def validate_aria_attributes(soup: BeautifulSoup) -> List[Dict[str, Any]]:
    logger.info("Validating ARIA attributes")
    issues: List[Dict[str, Any]] = []

    for i, el in enumerate(soup.find_all(attrs={"role": "button"}), start=1):
        if any(el.has_attr(h) for h in KEYBOARD_HANDLERS):
            continue
        markup = str(el)
        suggestion = add_attributes(
            markup, el.name, "tabindex=\"0\" onkeydown=\"if(event.key === 'Enter') this.click();\""
        )
        issues.append(
            _issue(
                f"aria-button-{i}", el.name,
                'Element with role="button" has no keyboard event handler',
                markup, suggestion, "error", NAME_ROLE_VALUE,
            )
        )

    aria_elements = [el for el in soup.find_all(True) if _has_aria_attribute(el)]
    for i, el in enumerate(aria_elements, start=1):
        if el.has_attr("role") or has_implicit_role(el):
            continue
        issues.append(
            _issue(
                f"aria-role-{i}", el.name,
                "Element with ARIA attributes but no explicit role",
                str(el), suggest_role(el), "warning", NAME_ROLE_VALUE,
            )
        )

    for i, el in enumerate(soup.find_all(INTERACTIVE_TAGS), start=1):
        if has_accessible_name(soup, el):
            continue
        issues.append(
            _issue(
                f"aria-name-{i}", el.name,
                "Interactive element without accessible name",
                str(el), suggest_accessible_name(el, i), "error", NAME_ROLE_VALUE,
            )
        )

    return issues


def find_div_lists(soup: BeautifulSoup) -> List[Dict[str, str]]:
    """Div containers whose direct div children look like list items."""
    found: List[Dict[str, str]] = []
    for container in soup.find_all("div"):
        children = container.find_all("div", recursive=False)
        if len(children) < 3:
            continue
        first_classes = class_string(children[0])
        similar = sum(1 for c in children if class_string(c) == first_classes)
        if similar < len(children) * 0.7:
            continue

        lines = [f'<ul class="{class_string(container)}">']
        for child in children:
            inner = "".join(str(c) for c in child.contents)
            lines.append(f'  <li class="{class_string(child)}">{inner}</li>')
        lines.append("</ul>")
        found.append({"element": "div", "code": truncate(str(container)), "suggestion": "\n".join(lines)})
    return found


def check_heading_order(soup: BeautifulSoup) -> List[Dict[str, str]]:
    headings = soup.find_all(HEADING_TAGS)
    out: List[Dict[str, str]] = []
    if len(headings) <= 1:
        return out

    previous = int(headings[0].name[1])
    for heading in headings[1:]:
        level = int(heading.name[1])
        if level > previous + 1:
            markup = str(heading)
            renamed = copy.copy(heading)
            renamed.name = f"h{previous + 1}"
            out.append(
                {
                    "element": heading.name,
                    "issue": f"Skipped heading level: {heading.name} after h{previous}",
                    "code": markup,
                    "suggestion": str(renamed),
                }
            )
        previous = level
    return out


def validate_semantic_structure(soup: BeautifulSoup) -> List[Dict[str, Any]]:
    logger.info("Validating semantic structure")
    issues: List[Dict[str, Any]] = []

    for i, section in enumerate(soup.find_all("section"), start=1):
        if section.find(HEADING_TAGS) is not None:
            continue
        issues.append(
            _issue(
                f"semantic-section-{i}", "section", "Section without heading",
                truncate(str(section)), suggest_section_heading(section, i),
                "warning", INFO_AND_RELATIONSHIPS,
            )
        )

    for i, lst in enumerate(find_div_lists(soup), start=1):
        issues.append(
            _issue(
                f"semantic-list-{i}", lst["element"],
                "List-like structure not using proper list elements",
                lst["code"], lst["suggestion"], "warning", INFO_AND_RELATIONSHIPS,
            )
        )

    for i, h in enumerate(check_heading_order(soup), start=1):
        issues.append(
            _issue(
                f"semantic-heading-{i}", h["element"], h["issue"], h["code"], h["suggestion"],
                "warning", INFO_AND_RELATIONSHIPS,
            )
        )

    return issues


def _status_candidates(soup: BeautifulSoup) -> List[Tag]:
    # an element carrying several status classes is reported once
    found: List[Tag] = []
    for cls in STATUS_CLASSES:
        found.extend(soup.find_all(class_=cls))
    return dedupe(found)


def validate_status_messages(soup: BeautifulSoup) -> List[Dict[str, Any]]:
    logger.info("Validating status messages")
    issues: List[Dict[str, Any]] = []
    for i, el in enumerate(_status_candidates(soup), start=1):
        if el.has_attr("aria-live") or (el.get("role") in LIVE_ROLES):
            continue
        issues.append(
            _issue(
                f"status-message-{i}", el.name,
                "Potential status message without aria-live or appropriate role",
                str(el), suggest_status_fix(el), "warning", STATUS_MESSAGES,
            )
        )
    return issues


def analyze_heading_structure(soup: BeautifulSoup) -> Dict[str, Any]:
    headings = soup.find_all(HEADING_TAGS)
    levels = {tag: 0 for tag in HEADING_TAGS}
    for h in headings:
        levels[h.name] += 1

    # a gap is a missing level with some deeper level present after it
    skipped = False
    seen_any = False
    for n in range(1, 7):
        if levels[f"h{n}"] > 0:
            seen_any = True
        elif seen_any and any(levels[f"h{m}"] > 0 for m in range(n + 1, 7)):
            skipped = True

    return {
        "totalHeadings": len(headings),
        "headingLevels": levels,
        "hasProperH1": levels["h1"] == 1,
        "hasSkippedLevels": skipped,
    }


def analyze_landmark_regions(soup: BeautifulSoup) -> Dict[str, Any]:
    landmarks = {
        "header": len(soup.find_all("header")),
        "nav": len(soup.find_all("nav")),
        "main": len(soup.find_all("main")),
        "aside": len(soup.find_all("aside")),
        "footer": len(soup.find_all("footer")),
        "search": len(soup.find_all(attrs={"role": "search"})),
        "form": len(soup.find_all("form")),
        "contentinfo": len(soup.find_all(attrs={"role": "contentinfo"})),
    }
    proper = all(landmarks[k] > 0 for k in ("header", "nav", "main", "footer"))
    return {"landmarks": landmarks, "hasProperStructure": proper}


def generate_fix(issue: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": issue["id"],
        "element": issue["element"],
        "issue": issue["issue"],
        "originalCode": issue["code"],
        "suggestedCode": issue["suggestion"],
        "severity": issue["severity"],
        "wcagCriteria": issue["wcagCriteria"],
    }


def validate_html(html: str) -> Dict[str, Any]:
    soup = parse_html(html)
    aria = validate_aria_attributes(soup)
    semantic = validate_semantic_structure(soup)
    status = validate_status_messages(soup)
    issues = aria + semantic + status
    logger.info("Found %d ARIA and semantic issues", len(issues))
    return {
        "totalIssues": len(issues),
        "ariaIssues": len(aria),
        "semanticIssues": len(semantic),
        "statusMessageIssues": len(status),
        "issues": issues,
    }


def find_issue(issues: List[Dict[str, Any]], issue_id: str) -> Optional[Dict[str, Any]]:
    for issue in issues:
        if issue["id"] == issue_id:
            return issue
    return None
