from __future__ import annotations

from typing import Optional

from langgraph.graph import StateGraph, START, END

from aaa_audit.agents.nodes import (
    aria_node,
    compliance_node,
    contrast_node,
    intake_node,
    make_alt_text_node,
    readability_node,
    remediation_node,
    summarizer_node,
)
from aaa_audit.graph.routers import route_after_compliance, route_after_intake
from aaa_audit.tools.checks.alt_text import AltTextBanks


def build_graph(banks: Optional[AltTextBanks] = None) -> "StateGraph":
    """
    Audit graph:
    - START -> intake
    - intake -> contrast (HTML) OR readability (text only)
    - contrast -> alt_text -> aria -> readability -> compliance
    - compliance -> remediation (actionable issues) OR summarizer
    - remediation -> summarizer -> END
    """
    g = StateGraph(dict)  # state is a Dict[str, Any]

    g.add_node("intake", intake_node)
    g.add_node("contrast", contrast_node)
    g.add_node("alt_text", make_alt_text_node(banks or AltTextBanks.default()))
    g.add_node("aria", aria_node)
    g.add_node("readability", readability_node)
    g.add_node("compliance", compliance_node)
    g.add_node("remediation", remediation_node)
    g.add_node("summarizer", summarizer_node)

    g.add_edge(START, "intake")

    g.add_conditional_edges(
        "intake",
        route_after_intake,
        {
            "contrast": "contrast",
            "readability": "readability",
        },
    )

    g.add_edge("contrast", "alt_text")
    g.add_edge("alt_text", "aria")
    g.add_edge("aria", "readability")
    g.add_edge("readability", "compliance")

    g.add_conditional_edges(
        "compliance",
        route_after_compliance,
        {
            "remediation": "remediation",
            "summarizer": "summarizer",
        },
    )

    g.add_edge("remediation", "summarizer")
    g.add_edge("summarizer", END)

    return g
