import pytest

from data_designer_proposal_guard import Hyperparameters, calculate_slop_score, get_slop_penalty
from data_designer_proposal_guard.slop import (
    analyze_sentence_variance,
    analyze_type_token_ratio,
    count_matches,
    detect_ai_slop,
    detect_em_dashes,
    detect_patterns,
    detect_structural_patterns,
    slop_severity,
)
from data_designer_proposal_guard.slop_patterns import BUZZWORDS, FILLER_PHRASES, GENERIC_BOOSTERS


CLEAN_TEXT = "Response time must be under 200ms. Support 10000 concurrent users. Uptime target is 99.9%."

FILLER_HEAVY = (
    "It's important to note that the rollout is robust. Needless to say, the tooling is seamless. "
    "At the end of the day, the platform is scalable. In order to ship, having said that, we start now. "
) * 2

STRUCTURAL_TEXT = (
    "In today's market, buyers compare vendors.\n"
    "Overview\nThe current tooling is slow.\n"
    "Key Points\nCost and speed matter. As discussed above, speed wins.\n"
    "Conclusion\nOn one hand the cost is low; on the other hand adoption is slow."
)


class TestLexicalDetection:
    def test_single_words_need_word_boundaries(self):
        assert detect_patterns("The fastest route", ["fast"]) == []
        assert detect_patterns("A fast route", ["fast"]) == ["fast"]

    def test_phrases_match_case_insensitively(self):
        assert count_matches("In Order To win, in order to grow", ["in order to"]) == {"in order to": 2}

    def test_curly_apostrophes_match(self):
        assert detect_patterns("It’s important to note that costs rose.", FILLER_PHRASES) == [
            "it's important to note that",
        ]

    def test_hyphenated_and_punctuated_patterns(self):
        assert detect_patterns("A cutting-edge, state-of-the-art stack.", BUZZWORDS) == [
            "state-of-the-art", "cutting-edge",
        ]
        assert count_matches("Absolutely! We can do that.", ["absolutely!"]) == {"absolutely!": 1}

    def test_counts_every_occurrence(self):
        findings = detect_ai_slop("Very good. Very fast. Very cheap.")
        assert findings.patterns["generic_boosters"] == ("very",)
        assert findings.counts["generic_boosters"] == 3

    def test_em_dashes(self):
        assert detect_em_dashes("This is a test — with an em-dash — and another one.") == 2
        assert detect_em_dashes("Regular dashes - like this - do not count.") == 0


class TestStructuralDetection:
    def test_all_heuristics(self):
        findings = detect_structural_patterns(STRUCTURAL_TEXT)
        assert findings.patterns == (
            "formulaic-introduction",
            'over-signposting: "as discussed above"',
            "template-section-progression",
            "symmetric-coverage",
        )

    def test_clean_text_has_none(self):
        assert detect_structural_patterns(CLEAN_TEXT).count == 0

    def test_signposting_counted_once(self):
        findings = detect_structural_patterns("As discussed above, we proceed. Before we proceed, note this.")
        assert findings.count == 1

    def test_structural_score(self):
        result = calculate_slop_score(STRUCTURAL_TEXT)
        assert result.breakdown.structural.score == 20
        assert result.breakdown.structural.max_score == 25


class TestStylometric:
    def test_too_few_sentences(self):
        result = analyze_sentence_variance("One sentence. Two sentences.")
        assert result.flag is False
        assert result.reason == "Too few sentences"

    def test_uniform_sentences_flagged(self):
        result = analyze_sentence_variance("The cat sat on the mat. The dog sat on the rug. The cow sat on the hay.")
        assert result.flag is True
        assert result.std_dev == 0.0
        assert result.sentence_count == 3

    def test_varied_sentences_not_flagged(self):
        text = "Stop now. " + " ".join(["word"] * 30) + ". Go home."
        result = analyze_sentence_variance(text)
        assert result.flag is False
        assert result.std_dev > 8

    def test_too_few_words(self):
        result = analyze_type_token_ratio("only a handful of words here")
        assert result.flag is False
        assert result.reason == "Too few words"

    def test_repetitive_vocabulary_flagged(self):
        result = analyze_type_token_ratio("alpha beta " * 100)
        assert result.flag is True
        assert result.ttr == 0.02

    def test_diverse_vocabulary_not_flagged(self):
        result = analyze_type_token_ratio(" ".join(f"word{i}" for i in range(120)))
        assert result.flag is False
        assert result.ttr == 1.0

    def test_short_text_uses_whole_text_ratio(self):
        result = analyze_type_token_ratio("repeat " * 60)
        assert result.flag is True
        assert result.word_count == 60


class TestCalculateSlopScore:
    def test_clean_text(self):
        result = calculate_slop_score(CLEAN_TEXT)
        assert result.severity == "clean"
        assert result.score <= 10
        assert result.breakdown.lexical.score == 0

    def test_empty_and_none(self):
        for text in ("", None):
            result = calculate_slop_score(text)
            assert result.score == 0
            assert result.severity == "clean"
            assert result.top_offenders == ()

    def test_filler_heavy_text_is_at_least_moderate(self):
        result = calculate_slop_score(FILLER_HEAVY)
        assert result.details.counts["filler_phrases"] >= 5
        assert result.details.counts["buzzwords"] >= 3
        assert result.severity in ("moderate", "heavy", "severe")

    def test_lexical_capped(self):
        result = calculate_slop_score("robust " * 100)
        assert result.breakdown.lexical.score == 40

    def test_em_dashes_add_to_lexical(self):
        result = calculate_slop_score("Revenue grew — costs fell — margins held")
        assert result.breakdown.lexical.score == 2
        assert result.breakdown.lexical.em_dashes == 2

    def test_more_banned_patterns_never_lower_score(self):
        base = "Revenue grew in the west region last year"
        scores = [calculate_slop_score(base + " robust" * n).score for n in range(11)]
        assert scores == sorted(scores)
        assert scores[-1] > scores[0]

    @pytest.mark.parametrize(
        "score,expected",
        [(0, "clean"), (10, "clean"), (11, "light"), (25, "light"), (26, "moderate"), (45, "moderate"),
         (46, "heavy"), (65, "heavy"), (66, "severe"), (80, "severe")],
    )
    def test_severity_bands(self, score, expected):
        assert slop_severity(score) == expected

    def test_top_offender_order(self):
        text = "Great question. In order to win, the incredibly robust plan ships — on one hand."
        result = calculate_slop_score(text)
        assert [o.category for o in result.top_offenders] == [
            "filler-phrase", "generic-booster", "buzzword", "sycophantic", "em-dash", "structural",
        ]
        assert result.top_offenders[4].pattern == "1 em-dash(es)"

    def test_top_offenders_truncated(self):
        text = " ".join(FILLER_PHRASES[:5] + GENERIC_BOOSTERS[:5] + BUZZWORDS[:5]) + " great question —"
        result = calculate_slop_score(text)
        assert len(result.top_offenders) == 10

    def test_hyperparameter_override(self):
        strict = Hyperparameters(lexical_match_points=5)
        assert calculate_slop_score(FILLER_HEAVY, strict).score >= calculate_slop_score(FILLER_HEAVY).score

    def test_payload(self):
        payload = calculate_slop_score(FILLER_HEAVY).to_payload()
        assert set(payload) == {"score", "max_score", "severity", "breakdown", "top_offenders"}
        assert payload["max_score"] == 80
        assert set(payload["breakdown"]) == {"lexical", "structural", "stylometric"}

    def test_rejects_non_text(self):
        with pytest.raises(TypeError):
            calculate_slop_score(123)


class TestGetSlopPenalty:
    def test_clean_text_no_penalty(self):
        result = get_slop_penalty("Response time must be under 200ms. API supports 10000 concurrent requests per second.")
        assert result.penalty == 0
        assert result.slop_score < 4
        assert result.issues == ()

    def test_vague_text_penalized_with_examples(self):
        result = get_slop_penalty("The system needs to be fast, easy to use, and scalable.")
        assert result.penalty == 4
        assert any(issue.startswith("Examples:") for issue in result.issues)

    def test_light_band(self):
        result = get_slop_penalty("Revenue grew very fast last year in the west.")
        assert result.penalty == 2
        assert result.issues[0].startswith("Light AI patterns detected (2 patterns)")

    def test_severe_band(self):
        result = get_slop_penalty(FILLER_HEAVY)
        assert result.penalty == 8
        assert result.severity != "clean"
        assert result.issues[0].startswith("Severe AI slop detected")
