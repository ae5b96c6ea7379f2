from __future__ import annotations

import pytest

from aaa_audit.app.errors import AuditExecutionError, InvalidRequestError
from aaa_audit.graph.build_graph import build_graph
from aaa_audit.graph.routers import route_after_compliance, route_after_intake
from aaa_audit.reports.audit_runner import AuditRunner

FAILING_HTML = (
    "<html><body>"
    '<p style="color:#777777">Low contrast text here.</p>'
    '<img src="team-photo.jpg">'
    "</body></html>"
)


@pytest.fixture
def runner(banks) -> AuditRunner:
    return AuditRunner(build_graph(banks).compile())


def test_routers():
    assert route_after_intake({"html": "<p>x</p>"}) == "contrast"
    assert route_after_intake({"html": "  "}) == "readability"

    actionable = {"outputs": {"compliance": {"issues": [{"severity": "warning"}]}}}
    assert route_after_compliance(actionable) == "remediation"
    assert route_after_compliance({**actionable, "remediate": False}) == "summarizer"
    assert route_after_compliance({"outputs": {"compliance": {"issues": [{"severity": "info"}]}}}) == "summarizer"


def test_text_only_audit_passes(runner):
    report = runner.run(text="The cat sat on the mat.", title="Plain")
    assert report["status"] == "PASS"
    assert report["wcagLevel"] == "AAA"
    assert report["pipeline"]["agents_run"] == ["intake", "readability", "compliance", "summarizer"]
    assert report["compliance"]["compliancePercentage"] == 100.0
    assert [c["criterion"][:5] for c in report["compliance"]["criteria"]] == ["3.1.3", "3.1.4", "3.1.5", "3.1.6"]
    assert report["remediation"] == {}
    assert report["summary"]["message"].startswith("No blocking issues found")


def test_html_audit_fails_and_remediates(runner):
    report = runner.run(html=FAILING_HTML, title="Landing page")
    assert report["status"] == "FAIL"
    assert report["pipeline"]["agents_run"] == [
        "intake", "contrast", "alt_text", "aria", "readability", "compliance", "remediation", "summarizer",
    ]
    assert report["pipeline"]["routing"]["has_html"] is True
    assert "total" in report["pipeline"]["timings_ms"]

    codes = [i["code"] for i in report["compliance"]["issues"]]
    assert codes == ["CONTRAST_INSUFFICIENT", "ALT_MISSING"]
    assert report["compliance"]["counts"] == {"error": 2, "warning": 0, "info": 0}
    assert report["compliance"]["compliancePercentage"] == 77.8

    fixes = report["remediation"]["fixes"]
    assert [f["action"] for f in fixes] == ["replace_color", "set_alt"]
    assert fixes[0]["before"] == "#777777"
    assert fixes[0]["after"] == "#515151"
    assert fixes[1]["after"] == "Team Photo displayed prominently against a clean background"
    assert "2 fix(es) suggested." in report["summary"]["message"]


def test_remediation_can_be_disabled(runner):
    report = runner.run(html=FAILING_HTML, remediate=False)
    assert report["status"] == "FAIL"
    assert "remediation" not in report["pipeline"]["agents_run"]
    assert report["remediation"] == {}


def test_aa_level_skips_text_criteria(runner):
    report = runner.run(html='<p style="color:#767676">Fine at AA.</p>', level="aa")
    assert report["wcagLevel"] == "AA"
    assert report["status"] == "PASS"
    criteria = [c["criterion"] for c in report["compliance"]["criteria"]]
    assert criteria[0].startswith("1.4.3")
    assert not any(c.startswith("3.1.") for c in criteria)


def test_hard_text_warns_at_aaa(runner):
    text = (
        "The implementation of comprehensive organizational accessibility requirements necessitates "
        "considerable institutional commitment, particularly regarding documentation and evaluation."
    )
    report = runner.run(text=text)
    assert report["status"] == "WARN"
    codes = [i["code"] for i in report["compliance"]["issues"]]
    assert "READING_LEVEL_TOO_HIGH" in codes
    [fix] = [f for f in report["remediation"]["fixes"] if f["action"] == "rewrite_text"]
    assert "use" in fix["after"]


def test_text_is_derived_from_html(runner):
    report = runner.run(html="<html><body><p>CMS setup uses the QQX tool.</p></body></html>")
    abbrs = {a["abbreviation"] for a in report["findings"]["readability"]["abbreviations"]}
    assert abbrs == {"CMS", "QQX"}
    codes = [i["code"] for i in report["compliance"]["issues"]]
    assert codes == ["ABBREVIATION_UNEXPANDED"]
    assert report["status"] == "WARN"


def test_empty_input_is_rejected(runner):
    with pytest.raises(InvalidRequestError):
        runner.run(html="  ", text="")


def test_graph_failure_is_wrapped():
    class Broken:
        def invoke(self, state):
            raise RuntimeError("boom")

    with pytest.raises(AuditExecutionError):
        AuditRunner(Broken()).run(text="hello")
