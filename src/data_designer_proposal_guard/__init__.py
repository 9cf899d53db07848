# SPDX-License-Identifier: Apache-2.0
"""Proposal Guard plugin for NeMo Data Designer.

Adds a ``proposal-guard`` column type that scores business proposals against a
four-dimension rubric, flags AI slop, and diffs each draft against an earlier
revision. Pure regex and sequence alignment: no LLM calls, no API dependencies.

Usage::

    from data_designer_proposal_guard.config import ProposalGuardColumnConfig

    builder.add_column(ProposalGuardColumnConfig(
        name="proposal_check",
        target_columns=["final_draft"],
        compare_column="first_draft",
        min_score=60,
    ))

The analysis functions can also be called directly::

    from data_designer_proposal_guard import calculate_slop_score, diff, validate_document
"""

from data_designer_proposal_guard.diff import diff, get_diff_stats, render_diff_html, tokenize
from data_designer_proposal_guard.models import DiffItem, DiffStats, DimensionResult, SlopResult, ValidationResult
from data_designer_proposal_guard.rubric import get_score_color, get_score_label, validate_document
from data_designer_proposal_guard.slop import Hyperparameters, calculate_slop_score, get_slop_penalty

__all__ = [
    "DiffItem",
    "DiffStats",
    "DimensionResult",
    "Hyperparameters",
    "SlopResult",
    "ValidationResult",
    "calculate_slop_score",
    "diff",
    "get_diff_stats",
    "get_score_color",
    "get_score_label",
    "get_slop_penalty",
    "render_diff_html",
    "tokenize",
    "validate_document",
]
