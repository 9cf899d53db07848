from __future__ import annotations

from typing import Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig


class ProposalGuardColumnConfig(SingleColumnConfig):
    """Score proposal text columns with the rubric, the slop detector and an optional diff.

    Each row's target text is scored 0-100 on four 25-point dimensions (problem,
    solution, impact, implementation) and checked for AI slop. When
    ``compare_column`` is set, the row is also diffed against that earlier draft.

    Attributes:
        target_columns: Columns whose text content will be concatenated and scored.
        compare_column: Optional column holding a previous revision to diff against.
        min_score: Minimum rubric score (0-100) for ``is_valid=True``. Defaults to 60
            (the boundary between "Needs work" and "Strong").
        include_issues: Include per-dimension issue strings and missing sections in output.
        include_slop: Include the slop score, severity, penalty and top offenders in output.
    """

    target_columns: list[str]
    compare_column: str | None = Field(default=None, description="Column holding an earlier draft to diff against")
    min_score: int = Field(default=60, ge=0, le=100, description="Minimum rubric score for is_valid=True")
    include_issues: bool = Field(default=True, description="Include actionable issue strings in output")
    include_slop: bool = Field(default=True, description="Include AI slop analysis in output")
    column_type: Literal["proposal-guard"] = "proposal-guard"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f4dd"

    @property
    def required_columns(self) -> list[str]:
        if self.compare_column and self.compare_column not in self.target_columns:
            return [*self.target_columns, self.compare_column]
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []
