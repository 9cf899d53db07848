from __future__ import annotations

from dataclasses import dataclass, field

DIFF_TYPES = ("equal", "insert", "delete")


# ---------------------------------------------------------------------------
# Diff
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DiffItem:
    """One classified token of the merged old/new sequence."""

    type: str
    text: str

    def __post_init__(self) -> None:
        if self.type not in DIFF_TYPES:
            raise ValueError(f"Unknown diff item type {self.type!r}, expected one of {DIFF_TYPES}")

    def to_payload(self) -> dict[str, object]:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True)
class DiffStats:
    additions: int = 0
    deletions: int = 0
    unchanged: int = 0

    def to_payload(self) -> dict[str, object]:
        return {"additions": self.additions, "deletions": self.deletions, "unchanged": self.unchanged}


# ---------------------------------------------------------------------------
# Rubric
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DimensionResult:
    score: int = 0
    max_score: int = 25
    issues: tuple[str, ...] = ()
    strengths: tuple[str, ...] = ()

    def to_payload(self) -> dict[str, object]:
        return {
            "score": self.score,
            "max_score": self.max_score,
            "issues": list(self.issues),
            "strengths": list(self.strengths),
        }


@dataclass(frozen=True)
class ValidationResult:
    problem_statement: DimensionResult = field(default_factory=DimensionResult)
    proposed_solution: DimensionResult = field(default_factory=DimensionResult)
    business_impact: DimensionResult = field(default_factory=DimensionResult)
    implementation_plan: DimensionResult = field(default_factory=DimensionResult)

    @property
    def total_score(self) -> int:
        return sum(d.score for d in self.dimensions().values())

    def dimensions(self) -> dict[str, DimensionResult]:
        return {
            "problem_statement": self.problem_statement,
            "proposed_solution": self.proposed_solution,
            "business_impact": self.business_impact,
            "implementation_plan": self.implementation_plan,
        }

    def issues(self) -> list[str]:
        return [issue for d in self.dimensions().values() for issue in d.issues]

    def to_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {"total_score": self.total_score}
        payload.update({name: d.to_payload() for name, d in self.dimensions().items()})
        return payload


@dataclass(frozen=True)
class SectionReport:
    found: tuple[str, ...]
    missing: tuple[str, ...]


# ---------------------------------------------------------------------------
# Slop
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Offender:
    pattern: str
    category: str

    def to_payload(self) -> dict[str, object]:
        return {"pattern": self.pattern, "category": self.category}


@dataclass(frozen=True)
class StructuralFindings:
    patterns: tuple[str, ...] = ()

    @property
    def count(self) -> int:
        return len(self.patterns)


@dataclass(frozen=True)
class SlopFindings:
    """Lexical matches per category plus dash and structural findings.

    ``patterns`` holds each distinct matched pattern in list order;
    ``counts`` holds the number of occurrences per category.
    """

    patterns: dict[str, tuple[str, ...]]
    counts: dict[str, int]
    em_dashes: int
    structural: StructuralFindings

    @property
    def lexical_matches(self) -> int:
        return sum(self.counts.values())

    @property
    def total_patterns(self) -> int:
        return self.lexical_matches + self.em_dashes + self.structural.count

    def to_payload(self) -> dict[str, object]:
        return {
            "patterns": {k: list(v) for k, v in self.patterns.items()},
            "counts": dict(self.counts),
            "em_dashes": self.em_dashes,
            "structural": list(self.structural.patterns),
            "total_patterns": self.total_patterns,
        }


@dataclass(frozen=True)
class SentenceVariance:
    flag: bool
    reason: str | None = None
    sentence_count: int = 0
    mean_length: float | None = None
    std_dev: float | None = None


@dataclass(frozen=True)
class TypeTokenRatio:
    flag: bool
    reason: str | None = None
    word_count: int = 0
    ttr: float | None = None


@dataclass(frozen=True)
class LexicalBreakdown:
    score: int
    max_score: int
    patterns: int
    em_dashes: int


@dataclass(frozen=True)
class StructuralBreakdown:
    score: int
    max_score: int
    patterns: tuple[str, ...]


@dataclass(frozen=True)
class StylometricBreakdown:
    score: int
    max_score: int
    issues: tuple[str, ...]
    sentence_variance: float | None
    ttr: float | None


@dataclass(frozen=True)
class SlopBreakdown:
    lexical: LexicalBreakdown
    structural: StructuralBreakdown
    stylometric: StylometricBreakdown


@dataclass(frozen=True)
class SlopResult:
    score: int
    severity: str
    breakdown: SlopBreakdown
    top_offenders: tuple[Offender, ...]
    details: SlopFindings
    max_score: int = 80

    def to_payload(self) -> dict[str, object]:
        return {
            "score": self.score,
            "max_score": self.max_score,
            "severity": self.severity,
            "breakdown": {
                "lexical": self.breakdown.lexical.score,
                "structural": self.breakdown.structural.score,
                "stylometric": self.breakdown.stylometric.score,
            },
            "top_offenders": [o.to_payload() for o in self.top_offenders],
        }


@dataclass(frozen=True)
class SlopPenalty:
    penalty: int
    issues: tuple[str, ...]
    slop_score: int
    severity: str
    details: SlopResult

    def to_payload(self) -> dict[str, object]:
        return {
            "penalty": self.penalty,
            "issues": list(self.issues),
            "slop_score": self.slop_score,
            "severity": self.severity,
        }
