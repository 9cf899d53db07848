from __future__ import annotations

import logging

import pandas as pd
from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_proposal_guard.config import ProposalGuardColumnConfig
from data_designer_proposal_guard.diff import diff, get_diff_stats
from data_designer_proposal_guard.rubric import detect_sections, get_score_label, validate_document
from data_designer_proposal_guard.slop import get_slop_penalty

logger = logging.getLogger(__name__)


def _cell_text(value: object) -> str:
    if value is None or (pd.api.types.is_scalar(value) and pd.isna(value)):
        return ""
    return str(value)


class ProposalGuardColumnGenerator(ColumnGeneratorFullColumn[ProposalGuardColumnConfig]):
    """Column generator that scores proposal drafts with the rubric and slop detector."""

    def score_row(self, text: str, previous: str | None = None) -> dict:
        validation = validate_document(text)
        output: dict = {
            "is_valid": validation.total_score >= self.config.min_score,
            "total_score": validation.total_score,
            "label": get_score_label(validation.total_score),
            "dimension_scores": {name: d.score for name, d in validation.dimensions().items()},
        }
        if self.config.include_issues:
            output["issues"] = validation.issues()
            output["missing_sections"] = list(detect_sections(text).missing)
        if self.config.include_slop:
            slop = get_slop_penalty(text)
            output["slop"] = {
                **slop.to_payload(),
                "top_offenders": [o.to_payload() for o in slop.details.top_offenders],
            }
        if previous is not None:
            output["diff_stats"] = get_diff_stats(diff(previous, text)).to_payload()
        return output

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f4dd Scoring column {self.config.name!r} against the proposal rubric")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   min_score: {self.config.min_score}")
        if self.config.compare_column:
            logger.info(f"   diffing against: {self.config.compare_column!r}")

        results = []
        for _, row in data[self.config.required_columns].iterrows():
            text = "\n\n".join(_cell_text(row[c]) for c in self.config.target_columns if _cell_text(row[c]))
            previous = _cell_text(row[self.config.compare_column]) if self.config.compare_column else None
            results.append(self.score_row(text, previous))

        data = data.copy()
        data[self.config.name] = results
        return data
