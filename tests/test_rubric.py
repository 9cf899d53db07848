import pytest

from data_designer_proposal_guard import get_score_color, get_score_label, validate_document
from data_designer_proposal_guard.rubric import (
    PROBLEM_SIGNALS,
    detect_risks,
    detect_sections,
    detect_success_metrics,
    score_problem_statement,
    score_proposed_solution,
    score_signals,
)


WELL_FORMED_PROPOSAL = """
# Problem Statement
Our operations team spends 500 hours every month on manual data entry.
This critical issue costs $50,000 annually and creates urgent bottlenecks.
The problem has been escalating for 6 months.

# Proposed Solution
We will implement an automated data pipeline as part of our integration strategy.
This approach will build a system to deliver measurable improvements.
We considered outsourcing as an alternative but rejected it on cost.

# Business Impact
Expected ROI of 300% with $150,000 annual revenue improvement.
Cost savings of $50,000 and productivity gains of 40%.

# Implementation Plan
Phase 1 (Q1 2025): Pilot deployment, owned by the data engineering lead.
Phase 2 (Q2 2025): Full rollout across all regions.
Budget required: $25,000 for 2 engineers over 3 months.
"""

UNSTRUCTURED = "This is just a short paragraph without proper sections or structure. " * 10


class TestValidateDocument:
    def test_empty_inputs_score_zero(self):
        for text in ("", None, "Too short", "   " + "x" * 20 + "   "):
            result = validate_document(text)
            assert result.total_score == 0
            assert result.issues() == []

    def test_well_formed_proposal(self):
        result = validate_document(WELL_FORMED_PROPOSAL)
        assert result.total_score > 50
        for dimension in result.dimensions().values():
            assert dimension.score > 10
        assert result.total_score >= 90

    def test_numbered_headings_count(self):
        numbered = WELL_FORMED_PROPOSAL
        for n, title in enumerate(("Problem Statement", "Proposed Solution", "Business Impact", "Implementation Plan"), 1):
            numbered = numbered.replace(f"# {title}", f"## {n}. {title}")
        plain, result = validate_document(WELL_FORMED_PROPOSAL), validate_document(numbered)
        assert result.total_score == plain.total_score
        assert not any("section heading" in issue for issue in result.issues())
        assert detect_sections(numbered).found == detect_sections(WELL_FORMED_PROPOSAL).found

    def test_lettered_heading_counts(self):
        result = score_problem_statement("### A) Problem Statement\nInvoices wait 12 days for approval, a critical bottleneck.")
        assert "Dedicated problem section" in result.strengths

    def test_document_title_is_not_a_solution_section(self):
        text = "# Strategic Proposal\nWe will implement and deploy a shared build cache across all teams."
        result = score_proposed_solution(text)
        assert "Add a Proposed Solution section heading" in result.issues
        assert "Dedicated solution section" not in result.strengths

    def test_total_is_sum_of_dimensions(self):
        for text in (WELL_FORMED_PROPOSAL, UNSTRUCTURED):
            result = validate_document(text)
            assert result.total_score == sum(d.score for d in result.dimensions().values())

    def test_scores_bounded(self):
        for text in (WELL_FORMED_PROPOSAL * 5, UNSTRUCTURED, "# Problem\n" * 40):
            result = validate_document(text)
            assert 0 <= result.total_score <= 100
            for dimension in result.dimensions().values():
                assert 0 <= dimension.score <= dimension.max_score == 25

    def test_unstructured_text_gets_specific_issues(self):
        result = validate_document(UNSTRUCTURED)
        assert "Add a Problem Statement section heading" in result.problem_statement.issues
        assert "Add an Implementation Plan section heading" in result.implementation_plan.issues
        assert "Quantify the expected impact with percentages, dollar amounts, or hours saved" in (
            result.business_impact.issues
        )

    def test_partial_tier_records_issue(self):
        text = "# Background\nWe have one problem with invoices that slows the finance group every single day."
        result = score_problem_statement(text)
        assert result.score == 3
        assert "Define the problem more clearly: name the specific gap, constraint, or bottleneck" in result.issues

    def test_strengths_reported(self):
        result = validate_document(WELL_FORMED_PROPOSAL)
        assert "Dedicated problem section" in result.problem_statement.strengths
        assert "Alternatives considered" in result.proposed_solution.strengths

    def test_payload_shape(self):
        payload = validate_document(WELL_FORMED_PROPOSAL).to_payload()
        assert set(payload) == {
            "total_score", "problem_statement", "proposed_solution", "business_impact", "implementation_plan",
        }
        assert set(payload["business_impact"]) == {"score", "max_score", "issues", "strengths"}

    def test_rejects_non_text(self):
        with pytest.raises(TypeError):
            validate_document(42)


class TestScoreSignals:
    def test_caps_at_max_score(self):
        result = score_signals(WELL_FORMED_PROPOSAL, PROBLEM_SIGNALS, max_score=10)
        assert result.score == 10
        assert result.max_score == 10


class TestScoreBands:
    @pytest.mark.parametrize(
        "score,color,label",
        [
            (100, "green", "Executive-ready"),
            (80, "green", "Executive-ready"),
            (79.5, "blue", "Strong"),
            (60, "blue", "Strong"),
            (45, "yellow", "Needs work"),
            (25, "orange", "Draft"),
            (19, "red", "Not a proposal"),
            (0, "red", "Not a proposal"),
        ],
    )
    def test_bands(self, score, color, label):
        assert get_score_color(score) == color
        assert get_score_label(score) == label

    def test_rejects_non_numbers(self):
        with pytest.raises(TypeError):
            get_score_color("80")
        with pytest.raises(TypeError):
            get_score_label(None)


class TestSupplementaryDetection:
    def test_detect_sections(self):
        report = detect_sections(WELL_FORMED_PROPOSAL)
        assert report.found == ("Problem Statement", "Proposed Solution", "Business Impact", "Implementation Plan")
        assert report.missing == ("Resources/Budget", "Risks/Assumptions", "Success Metrics")

    def test_detect_risks(self):
        result = detect_risks("# Risks\nThe main risk is vendor delay; mitigation is a backup supplier.")
        assert result["has_risk_section"] is True
        assert result["risk_count"] >= 1
        assert result["mitigation_count"] >= 1

    def test_detect_success_metrics(self):
        result = detect_success_metrics("# Success Metrics\nTarget: reduce handling time by 40% within two quarters.")
        assert result["has_metrics_section"] is True
        assert result["quantified_count"] >= 1
        assert result["timebound_count"] >= 1
