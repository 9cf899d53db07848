# Rubric scorer for business proposals.
#
# Four 25-point dimensions, each a table of regex signals. A signal scores the
# points of the highest tier its match count reaches; a missing or partial
# signal records a specific issue so every lost point can be traced.

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from data_designer_proposal_guard.models import DimensionResult, SectionReport, ValidationResult
from data_designer_proposal_guard.text_utils import ensure_text

logger = logging.getLogger(__name__)

MIN_DOCUMENT_CHARS = 50
DIMENSION_MAX_SCORE = 25

# ---------------------------------------------------------------------------
# Compiled patterns
# ---------------------------------------------------------------------------


def _heading(*keywords: str) -> re.Pattern[str]:
    # markdown heading whose first or second word is a topic keyword
    return re.compile(
        r"^#{1,6}[ \t]*(?:\S+[ \t]+)?(?:" + "|".join(keywords) + r")",
        re.IGNORECASE | re.MULTILINE,
    )


def _words(*alternatives: str) -> re.Pattern[str]:
    return re.compile(r"\b(?:" + "|".join(alternatives) + r")\b", re.IGNORECASE)


PROBLEM_HEADING_RE = _heading("problem", "challenge", "issue", "opportunit", "context", r"pain.?point", r"current.?state")
SOLUTION_HEADING_RE = _heading("solution", "approach", "recommendation", "strategy")
IMPACT_HEADING_RE = _heading("impact", "benefit", "outcome", "value", "roi", "return", r"business.?case")
IMPLEMENTATION_HEADING_RE = _heading(
    "implementation", "plan", "timeline", "roadmap", "execution", "delivery", "rollout", r"next.?steps"
)
RESOURCES_HEADING_RE = _heading("resource", "budget", "cost", "investment", "team", "pricing", "commercials")
RISKS_HEADING_RE = _heading("risk", "assumption", "dependenc", "constraint")
METRICS_HEADING_RE = _heading("success", "metric", "kpi", "measure", "objective")

QUANTIFIED_RE = re.compile(
    r"\$\s?\d[\d,.]*"
    r"|\b\d[\d,.]*\s*(?:%|(?:percent|million|billion|thousand|hours?|days?|weeks?|months?|years?"
    r"|users?|customers?|transactions?|dollars?)\b)",
    re.IGNORECASE,
)

PROBLEM_LANGUAGE_RE = _words(
    r"problems?", r"challenges?", r"issues?", r"opportunit(?:y|ies)", r"gaps?", r"limitations?",
    r"constraints?", r"blockers?", r"bottlenecks?", r"pain.?points?",
)
URGENCY_RE = _words(
    "urgent", "urgency", "critical", r"immediate(?:ly)?", "priority", r"time.sensitive", r"deadlines?", "escalating",
)
SOLUTION_LANGUAGE_RE = _words(
    r"solutions?", r"approach(?:es)?", r"proposals?", r"strateg(?:y|ies)", r"plans?", r"initiatives?",
    r"programs?", r"projects?",
)
ACTION_RE = _words(
    "implement", "execute", "deliver", "launch", "build", "create", "develop", "establish", "deploy",
    r"roll\s?out", "automate", "migrate",
)
ALTERNATIVES_RE = _words(
    r"alternatives?", r"options?", r"trade.?offs?", r"instead\s+of", r"compared\s+(?:to|with)", "considered",
    "versus",
)
IMPACT_LANGUAGE_RE = _words(
    "impact", r"benefits?", "value", "roi", r"returns?", r"outcomes?", r"results?", r"improvements?",
    r"gains?", "savings",
)
FINANCIAL_RE = _words(r"revenue", r"costs?", "savings", "profit", r"margins?", "efficiency", "productivity")
PHASE_RE = _words(r"phases?", r"stages?", r"milestones?", r"sprints?", r"iterations?", r"waves?", r"releases?")
DATE_RE = _words(
    r"q[1-4]", r"h[12]", r"fy\s?\d{2,4}", r"(?:19|20)\d{2}", r"weeks?", r"months?", r"quarters?",
    r"jan(?:uary)?", r"feb(?:ruary)?", r"mar(?:ch)?", r"apr(?:il)?", r"june?", r"july?", r"aug(?:ust)?",
    r"sep(?:t(?:ember)?)?", r"oct(?:ober)?", r"nov(?:ember)?", r"dec(?:ember)?",
)
OWNERSHIP_RE = _words(
    r"owners?", r"owned\s+by", r"leads?", "responsible", "accountable", r"teams?", "department",
    r"managers?", r"directors?", r"sponsors?", r"engineers?",
)
RESOURCES_RE = _words(r"resources?", "budget", "investment", "headcount", r"ftes?", "capacity", "funding")
RISK_LANGUAGE_RE = _words(r"risks?", r"assumptions?", r"dependenc(?:y|ies)", r"blockers?", r"obstacles?", r"unknowns?")
MITIGATION_RE = _words(r"mitigat\w*", r"contingenc(?:y|ies)", "fallback", r"plan\s+b", "backup", r"workarounds?")
METRICS_LANGUAGE_RE = _words(r"metrics?", r"kpis?", r"measures?", r"indicators?", r"targets?", r"benchmarks?", r"baselines?")
TIMEBOUND_RE = _words("by", "within", r"end\s+of", r"q[1-4]", r"fy\s?\d{2,4}")

# ---------------------------------------------------------------------------
# Signal tables
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Signal:
    """One rubric check.

    ``tiers`` are ``(min_matches, points)`` pairs, best first. Reaching the first
    tier records ``strength``; reaching a later tier records ``partial``; no tier
    records ``missing``.
    """

    pattern: re.Pattern[str]
    tiers: tuple[tuple[int, int], ...]
    missing: str
    strength: str
    partial: str | None = None

    @property
    def max_points(self) -> int:
        return self.tiers[0][1]


PROBLEM_SIGNALS = (
    Signal(PROBLEM_HEADING_RE, ((1, 10),), "Add a Problem Statement section heading", "Dedicated problem section"),
    Signal(
        PROBLEM_LANGUAGE_RE, ((3, 6), (1, 3)),
        "Clearly define the problem or opportunity being addressed",
        "Problem framed in concrete terms",
        partial="Define the problem more clearly: name the specific gap, constraint, or bottleneck",
    ),
    Signal(
        QUANTIFIED_RE, ((1, 5),),
        "Quantify the problem with numbers, percentages, or dollar amounts",
        "Problem is quantified",
    ),
    Signal(URGENCY_RE, ((1, 4),), "Explain why this is urgent and what waiting costs", "Urgency established"),
)

SOLUTION_SIGNALS = (
    Signal(SOLUTION_HEADING_RE, ((1, 10),), "Add a Proposed Solution section heading", "Dedicated solution section"),
    Signal(
        SOLUTION_LANGUAGE_RE, ((3, 6), (1, 3)),
        "Describe the proposed solution",
        "Solution clearly described",
        partial="Describe the solution more clearly",
    ),
    Signal(
        ACTION_RE, ((3, 5), (1, 3)),
        "Add actionable steps: say what will be built, deployed, or launched",
        "Solution is actionable",
        partial="Make the solution more actionable with concrete steps",
    ),
    Signal(
        ALTERNATIVES_RE, ((1, 4),),
        "Show the alternatives considered and why this option was chosen",
        "Alternatives considered",
    ),
)

IMPACT_SIGNALS = (
    Signal(IMPACT_HEADING_RE, ((1, 10),), "Add a Business Impact section heading", "Dedicated impact section"),
    Signal(
        IMPACT_LANGUAGE_RE, ((3, 5), (1, 3)),
        "Describe the expected business impact",
        "Impact clearly described",
        partial="Describe business impact more clearly",
    ),
    Signal(
        QUANTIFIED_RE, ((2, 5), (1, 3)),
        "Quantify the expected impact with percentages, dollar amounts, or hours saved",
        "Impact quantified with multiple metrics",
        partial="Add more quantified impact metrics",
    ),
    Signal(
        FINANCIAL_RE, ((1, 5),),
        "Include financial impact such as revenue, cost, or margin",
        "Financial impact stated",
    ),
)

IMPLEMENTATION_SIGNALS = (
    Signal(
        IMPLEMENTATION_HEADING_RE, ((1, 10),),
        "Add an Implementation Plan section heading",
        "Dedicated implementation section",
    ),
    Signal(
        PHASE_RE, ((2, 5), (1, 3)),
        "Define phases or milestones",
        "Phased delivery with milestones",
        partial="Add more milestones",
    ),
    Signal(
        DATE_RE, ((2, 5), (1, 3)),
        "Include a timeline with dates, months, or quarters",
        "Timeline with specific dates",
        partial="Add more timeline details",
    ),
    Signal(OWNERSHIP_RE, ((1, 3),), "Name who owns delivery: an owner, lead, or team", "Ownership named"),
    Signal(RESOURCES_RE, ((1, 2),), "Identify required resources or budget", "Resources identified"),
)

REQUIRED_SECTIONS = (
    ("Problem Statement", PROBLEM_HEADING_RE),
    ("Proposed Solution", SOLUTION_HEADING_RE),
    ("Business Impact", IMPACT_HEADING_RE),
    ("Implementation Plan", IMPLEMENTATION_HEADING_RE),
    ("Resources/Budget", RESOURCES_HEADING_RE),
    ("Risks/Assumptions", RISKS_HEADING_RE),
    ("Success Metrics", METRICS_HEADING_RE),
)

_SCORE_BANDS = (
    (80, "green", "Executive-ready"),
    (60, "blue", "Strong"),
    (40, "yellow", "Needs work"),
    (20, "orange", "Draft"),
)
_LOWEST_BAND = ("red", "Not a proposal")

# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------


def score_signals(text: str, signals: tuple[Signal, ...], max_score: int = DIMENSION_MAX_SCORE) -> DimensionResult:
    score = 0
    issues: list[str] = []
    strengths: list[str] = []
    for signal in signals:
        matches = len(signal.pattern.findall(text))
        for rank, (min_matches, points) in enumerate(signal.tiers):
            if matches >= min_matches:
                score += points
                if rank == 0:
                    strengths.append(signal.strength)
                elif signal.partial:
                    issues.append(signal.partial)
                break
        else:
            issues.append(signal.missing)
    return DimensionResult(score=min(score, max_score), max_score=max_score, issues=tuple(issues), strengths=tuple(strengths))


def score_problem_statement(text: str) -> DimensionResult:
    return score_signals(ensure_text(text), PROBLEM_SIGNALS)


def score_proposed_solution(text: str) -> DimensionResult:
    return score_signals(ensure_text(text), SOLUTION_SIGNALS)


def score_business_impact(text: str) -> DimensionResult:
    return score_signals(ensure_text(text), IMPACT_SIGNALS)


def score_implementation_plan(text: str) -> DimensionResult:
    return score_signals(ensure_text(text), IMPLEMENTATION_SIGNALS)


def validate_document(text: str | None) -> ValidationResult:
    """Score a proposal against the four-dimension rubric.

    Args:
        text: Markdown proposal. ``None`` or fewer than ``MIN_DOCUMENT_CHARS``
            non-blank characters gives an all-zero result with no issues.

    Returns:
        ``ValidationResult`` whose ``total_score`` (0-100) is the sum of the
        four dimension scores.
    """
    text = ensure_text(text)
    if len(text.strip()) < MIN_DOCUMENT_CHARS:
        logger.debug(f"Skipping rubric scoring: {len(text.strip())} chars is below {MIN_DOCUMENT_CHARS}")
        return ValidationResult()

    return ValidationResult(
        problem_statement=score_problem_statement(text),
        proposed_solution=score_proposed_solution(text),
        business_impact=score_business_impact(text),
        implementation_plan=score_implementation_plan(text),
    )


def _check_score(score: object) -> float:
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise TypeError(f"score must be a number, got {type(score).__name__}")
    return score


def get_score_color(score: float) -> str:
    score = _check_score(score)
    for floor, color, _label in _SCORE_BANDS:
        if score >= floor:
            return color
    return _LOWEST_BAND[0]


def get_score_label(score: float) -> str:
    score = _check_score(score)
    for floor, _color, label in _SCORE_BANDS:
        if score >= floor:
            return label
    return _LOWEST_BAND[1]


# ---------------------------------------------------------------------------
# Supplementary detection
# ---------------------------------------------------------------------------


def detect_sections(text: str | None) -> SectionReport:
    """Report which of the seven standard proposal headings are present."""
    text = ensure_text(text)
    found = tuple(name for name, pattern in REQUIRED_SECTIONS if pattern.search(text))
    missing = tuple(name for name, _ in REQUIRED_SECTIONS if name not in found)
    return SectionReport(found=found, missing=missing)


def detect_risks(text: str | None) -> dict[str, object]:
    text = ensure_text(text)
    return {
        "has_risk_section": bool(RISKS_HEADING_RE.search(text)),
        "risk_count": len(RISK_LANGUAGE_RE.findall(text)),
        "mitigation_count": len(MITIGATION_RE.findall(text)),
    }


def detect_success_metrics(text: str | None) -> dict[str, object]:
    text = ensure_text(text)
    return {
        "has_metrics_section": bool(METRICS_HEADING_RE.search(text)),
        "metrics_count": len(METRICS_LANGUAGE_RE.findall(text)),
        "quantified_count": len(QUANTIFIED_RE.findall(text)),
        "timebound_count": len(TIMEBOUND_RE.findall(text)),
    }
