from __future__ import annotations

import time
from typing import Any, Callable, Dict

from aaa_audit.agents.compliance_agent import run_compliance_agent
from aaa_audit.agents.remediation_agent import run_remediation_agent
from aaa_audit.agents.summarizer_agent import run_summarizer_agent
from aaa_audit.core.policies import policy_for_level
from aaa_audit.tools.checks.alt_text import AltTextBanks, analyze_images
from aaa_audit.tools.checks.aria import validate_html
from aaa_audit.tools.checks.contrast_rules import analyze_contrast
from aaa_audit.tools.checks.dom import parse_html, text_of
from aaa_audit.tools.text.readability import analyze_readability, words_of
from aaa_audit.tools.text.vocabulary import find_abbreviations, find_pronunciation_issues, find_unusual_words

Node = Callable[[Dict[str, Any]], Dict[str, Any]]


def _now_ms() -> int:
    return int(time.time() * 1000)


def _timed(name: str, state: Dict[str, Any], fn: Callable[[], None]) -> Dict[str, Any]:
    pipeline = state["pipeline"]
    t0 = _now_ms()
    pipeline["agents_run"].append(name)
    fn()
    pipeline["timings_ms"][name] = _now_ms() - t0
    return state


def intake_node(state: Dict[str, Any]) -> Dict[str, Any]:
    """
    Normalises the input: resolves the level and derives text from HTML when none was given.
    """
    pipeline = state.get("pipeline", {}) or {}
    pipeline.setdefault("graph_version", "v1")
    pipeline.setdefault("agents_run", [])
    pipeline.setdefault("timings_ms", {})
    pipeline.setdefault("routing", {})
    pipeline["agents_run"].append("intake")
    state["pipeline"] = pipeline

    state["level"] = policy_for_level(state.get("level")).level
    html = state.get("html") or ""
    if not (state.get("text") or "").strip() and html.strip():
        soup = parse_html(html)
        body = soup.body or soup
        state["text"] = text_of(body)

    pipeline["routing"]["has_html"] = bool(html.strip())
    state.setdefault("outputs", {})
    return state


def contrast_node(state: Dict[str, Any]) -> Dict[str, Any]:
    def run() -> None:
        policy = policy_for_level(state.get("level"))
        state["outputs"]["contrast"] = analyze_contrast(state["html"], policy)

    return _timed("contrast", state, run)


def make_alt_text_node(banks: AltTextBanks) -> Node:
    def alt_text_node(state: Dict[str, Any]) -> Dict[str, Any]:
        def run() -> None:
            state["outputs"]["alt_text"] = analyze_images(state["html"], banks)

        return _timed("alt_text", state, run)

    return alt_text_node


def aria_node(state: Dict[str, Any]) -> Dict[str, Any]:
    def run() -> None:
        state["outputs"]["aria"] = validate_html(state["html"])

    return _timed("aria", state, run)


def readability_node(state: Dict[str, Any]) -> Dict[str, Any]:
    def run() -> None:
        policy = policy_for_level(state.get("level"))
        text = state.get("text") or ""
        result = analyze_readability(text, policy.readability_min_score)
        result.update(
            {
                "words": len(words_of(text)),
                "unusualWords": find_unusual_words(text),
                "abbreviations": find_abbreviations(text),
                "pronunciation": find_pronunciation_issues(text),
            }
        )
        state["outputs"]["readability"] = result

    return _timed("readability", state, run)


def compliance_node(state: Dict[str, Any]) -> Dict[str, Any]:
    def run() -> None:
        result = run_compliance_agent(state)
        state["status"] = result["status"]
        state["pipeline"]["routing"]["compliance_result"] = result["status"]
        state["outputs"]["compliance"] = result["compliance"]

    return _timed("compliance", state, run)


def remediation_node(state: Dict[str, Any]) -> Dict[str, Any]:
    return _timed("remediation", state, lambda: run_remediation_agent(state))


def summarizer_node(state: Dict[str, Any]) -> Dict[str, Any]:
    pipeline = state["pipeline"]
    t0 = _now_ms()
    pipeline["agents_run"].append("summarizer")

    state = run_summarizer_agent(state)

    pipeline["timings_ms"]["summarizer"] = _now_ms() - t0
    pipeline["timings_ms"]["total"] = sum(pipeline["timings_ms"].values())
    return state
