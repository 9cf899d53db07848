# AI slop detector for proposal drafts.
#
# Three independent analyses combined by fixed weights:
#   lexical      (max 40)  phrase-category matches plus em dash count
#   structural   (max 25)  formulaic document-shape heuristics
#   stylometric  (max 15)  sentence-length spread and windowed type-token ratio
# Higher score = more slop. ``get_slop_penalty`` maps the score onto a small
# integer penalty for downstream scorers.

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from data_designer_proposal_guard.models import (
    LexicalBreakdown,
    Offender,
    SentenceVariance,
    SlopBreakdown,
    SlopFindings,
    SlopPenalty,
    SlopResult,
    StructuralBreakdown,
    StructuralFindings,
    StylometricBreakdown,
    TypeTokenRatio,
)
from data_designer_proposal_guard.slop_patterns import (
    EM_DASH,
    FORMULAIC_INTRO_RE,
    LEXICAL_CATEGORIES,
    OVER_SIGNPOSTING,
    SYMMETRIC_COVERAGE_RE,
    TEMPLATE_SECTIONS_RE,
)
from data_designer_proposal_guard.text_utils import ensure_text

# ---------------------------------------------------------------------------
# Hyperparameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Hyperparameters:
    """Thresholds, caps and point values used by the slop detector."""

    lexical_match_points: int = 2
    lexical_cap: int = 40
    structural_pattern_points: int = 5
    structural_cap: int = 25
    stylometric_flag_points: int = 5
    stylometric_cap: int = 15
    max_score: int = 80

    sentence_min_count: int = 3
    sentence_std_dev_threshold: float = 8.0
    ttr_window_words: int = 100
    ttr_min_words: int = 50
    ttr_threshold: float = 0.45

    severity_clean_max: int = 10
    severity_light_max: int = 25
    severity_moderate_max: int = 45
    severity_heavy_max: int = 65

    offenders_filler: int = 3
    offenders_boosters: int = 3
    offenders_buzzwords: int = 3
    offenders_sycophantic: int = 2
    offenders_structural: int = 2
    offenders_max: int = 10

    penalty_severe_score: int = 40
    penalty_severe_patterns: int = 10
    penalty_heavy_score: int = 25
    penalty_heavy_patterns: int = 6
    penalty_moderate_score: int = 12
    penalty_moderate_patterns: int = 3
    penalty_light_score: int = 4
    penalty_light_patterns: int = 1
    penalty_examples: int = 3


DEFAULT_HYPERPARAMETERS = Hyperparameters()

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_NON_WORD_RE = re.compile(r"[^\w\s]")
_CURLY_APOSTROPHE_RE = re.compile("[\u2018\u2019]")


def _normalize(text: str) -> str:
    return _CURLY_APOSTROPHE_RE.sub("'", text)


def _word_re(pattern: str) -> re.Pattern[str]:
    return re.compile(r"(?<!\w)" + re.escape(pattern) + r"(?!\w)", re.IGNORECASE)


_WORD_RES: dict[str, re.Pattern[str]] = {
    p: _word_re(p) for patterns in LEXICAL_CATEGORIES.values() for p in patterns if " " not in p
}


def count_matches(text: str, patterns: list[str]) -> dict[str, int]:
    """Count occurrences of each pattern in ``text``.

    Multi-word phrases are matched as case-insensitive substrings; single words
    (hyphenated terms included) must stand alone between non-word characters.
    Patterns with no match are omitted; key order follows ``patterns``.
    """
    text = _normalize(ensure_text(text))
    lower = text.lower()
    found: dict[str, int] = {}
    for pattern in patterns:
        if " " in pattern:
            n = lower.count(pattern.lower())
        else:
            regex = _WORD_RES.get(pattern) or _word_re(pattern)
            n = len(regex.findall(text))
        if n:
            found[pattern] = n
    return found


def detect_patterns(text: str, patterns: list[str]) -> list[str]:
    """Return the patterns from ``patterns`` that occur in ``text``."""
    return list(count_matches(text, patterns))


def detect_em_dashes(text: str) -> int:
    return ensure_text(text).count(EM_DASH)


def detect_structural_patterns(text: str) -> StructuralFindings:
    text = _normalize(ensure_text(text))
    lower = text.lower()
    found: list[str] = []

    if FORMULAIC_INTRO_RE.search(text):
        found.append("formulaic-introduction")

    for phrase in OVER_SIGNPOSTING:
        if phrase in lower:
            found.append(f'over-signposting: "{phrase}"')
            break

    if TEMPLATE_SECTIONS_RE.search(text):
        found.append("template-section-progression")

    if SYMMETRIC_COVERAGE_RE.search(text):
        found.append("symmetric-coverage")

    return StructuralFindings(patterns=tuple(found))


def detect_ai_slop(text: str) -> SlopFindings:
    """Run every lexical category, the dash count and the structural heuristics."""
    text = ensure_text(text)
    patterns: dict[str, tuple[str, ...]] = {}
    counts: dict[str, int] = {}
    for category, category_patterns in LEXICAL_CATEGORIES.items():
        matches = count_matches(text, category_patterns)
        patterns[category] = tuple(matches)
        counts[category] = sum(matches.values())
    return SlopFindings(
        patterns=patterns,
        counts=counts,
        em_dashes=detect_em_dashes(text),
        structural=detect_structural_patterns(text),
    )


# ---------------------------------------------------------------------------
# Stylometric analyses
# ---------------------------------------------------------------------------


def analyze_sentence_variance(text: str, hyperparameters: Hyperparameters | None = None) -> SentenceVariance:
    """Flag unnaturally uniform sentence lengths (population std dev of word counts)."""
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    sentences = [s for s in _SENTENCE_SPLIT_RE.split(ensure_text(text)) if s.strip()]
    if len(sentences) < hp.sentence_min_count:
        return SentenceVariance(flag=False, reason="Too few sentences", sentence_count=len(sentences))

    lengths = [len(s.split()) for s in sentences]
    mean = sum(lengths) / len(lengths)
    variance = sum((n - mean) ** 2 for n in lengths) / len(lengths)
    std_dev = math.sqrt(variance)
    flag = std_dev < hp.sentence_std_dev_threshold
    return SentenceVariance(
        flag=flag,
        reason=(
            f"Low sentence variance (std dev {std_dev:.1f}, target > {hp.sentence_std_dev_threshold:g})"
            if flag else None
        ),
        sentence_count=len(sentences),
        mean_length=round(mean, 1),
        std_dev=round(std_dev, 1),
    )


def analyze_type_token_ratio(text: str, hyperparameters: Hyperparameters | None = None) -> TypeTokenRatio:
    """Flag repetitive vocabulary via the mean type-token ratio of fixed word windows."""
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    words = _NON_WORD_RE.sub("", ensure_text(text).lower()).split()
    if len(words) < hp.ttr_min_words:
        return TypeTokenRatio(flag=False, reason="Too few words", word_count=len(words))

    size = hp.ttr_window_words
    ratios = [len(set(words[i : i + size])) / size for i in range(0, len(words) - size + 1, size)]
    ttr = sum(ratios) / len(ratios) if ratios else len(set(words)) / len(words)
    flag = ttr < hp.ttr_threshold
    return TypeTokenRatio(
        flag=flag,
        reason=f"Low vocabulary diversity (TTR {ttr:.2f}, target > {hp.ttr_threshold:g})" if flag else None,
        word_count=len(words),
        ttr=round(ttr, 2),
    )


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------


def slop_severity(score: int, hyperparameters: Hyperparameters | None = None) -> str:
    """Map a slop score onto its severity band."""
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    if score <= hp.severity_clean_max:
        return "clean"
    if score <= hp.severity_light_max:
        return "light"
    if score <= hp.severity_moderate_max:
        return "moderate"
    if score <= hp.severity_heavy_max:
        return "heavy"
    return "severe"


def _top_offenders(findings: SlopFindings, hp: Hyperparameters) -> tuple[Offender, ...]:
    offenders: list[Offender] = []
    for category, label, cap in (
        ("filler_phrases", "filler-phrase", hp.offenders_filler),
        ("generic_boosters", "generic-booster", hp.offenders_boosters),
        ("buzzwords", "buzzword", hp.offenders_buzzwords),
        ("sycophantic", "sycophantic", hp.offenders_sycophantic),
    ):
        offenders.extend(Offender(p, label) for p in findings.patterns[category][:cap])
    if findings.em_dashes:
        offenders.append(Offender(f"{findings.em_dashes} em-dash(es)", "em-dash"))
    offenders.extend(Offender(p, "structural") for p in findings.structural.patterns[: hp.offenders_structural])
    return tuple(offenders[: hp.offenders_max])


def calculate_slop_score(text: str | None, hyperparameters: Hyperparameters | None = None) -> SlopResult:
    """Score text for AI slop.

    Args:
        text: The document to analyze. ``None`` is treated as empty.
        hyperparameters: Optional tuning overrides. Uses the defaults if omitted.

    Returns:
        ``SlopResult`` with the total score (0-80 in practice), its severity
        band, the per-analysis breakdown and the top offending patterns.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    text = ensure_text(text)
    findings = detect_ai_slop(text)
    sentences = analyze_sentence_variance(text, hp)
    ttr = analyze_type_token_ratio(text, hp)

    lexical_score = min(hp.lexical_cap, findings.lexical_matches * hp.lexical_match_points + findings.em_dashes)
    structural_score = min(hp.structural_cap, findings.structural.count * hp.structural_pattern_points)

    stylometric_issues = tuple(a.reason for a in (sentences, ttr) if a.flag and a.reason)
    stylometric_score = min(hp.stylometric_cap, len(stylometric_issues) * hp.stylometric_flag_points)

    score = lexical_score + structural_score + stylometric_score
    return SlopResult(
        score=score,
        severity=slop_severity(score, hp),
        breakdown=SlopBreakdown(
            lexical=LexicalBreakdown(
                score=lexical_score, max_score=hp.lexical_cap,
                patterns=findings.lexical_matches, em_dashes=findings.em_dashes,
            ),
            structural=StructuralBreakdown(
                score=structural_score, max_score=hp.structural_cap, patterns=findings.structural.patterns,
            ),
            stylometric=StylometricBreakdown(
                score=stylometric_score, max_score=hp.stylometric_cap, issues=stylometric_issues,
                sentence_variance=sentences.std_dev, ttr=ttr.ttr,
            ),
        ),
        top_offenders=_top_offenders(findings, hp),
        details=findings,
        max_score=hp.max_score,
    )


def get_slop_penalty(text: str | None, hyperparameters: Hyperparameters | None = None) -> SlopPenalty:
    """Map the slop score and raw pattern count onto a 0/2/4/6/8 penalty."""
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    result = calculate_slop_score(text, hp)
    n = result.details.total_patterns

    issues: list[str] = []
    if result.score >= hp.penalty_severe_score or n >= hp.penalty_severe_patterns:
        penalty = 8
        issues.append(f"Severe AI slop detected ({n} patterns): substantial rewrite needed")
    elif result.score >= hp.penalty_heavy_score or n >= hp.penalty_heavy_patterns:
        penalty = 6
        issues.append(f"Heavy AI slop detected ({n} patterns): significant editing needed")
    elif result.score >= hp.penalty_moderate_score or n >= hp.penalty_moderate_patterns:
        penalty = 4
        issues.append(f"Moderate AI slop detected ({n} patterns): editing recommended")
    elif result.score >= hp.penalty_light_score or n >= hp.penalty_light_patterns:
        penalty = 2
        issues.append(f"Light AI patterns detected ({n} patterns)")
    else:
        penalty = 0

    if result.top_offenders:
        examples = ", ".join(f'"{o.pattern}"' for o in result.top_offenders[: hp.penalty_examples])
        issues.append(f"Examples: {examples}")

    return SlopPenalty(
        penalty=penalty,
        issues=tuple(issues),
        slop_score=result.score,
        severity=result.severity,
        details=result,
    )
