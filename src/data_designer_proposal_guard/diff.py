"""Word-level diff between two revisions of a document.

Text is split into alternating word and whitespace tokens, aligned with a
longest-common-subsequence table, and emitted as ``DiffItem`` values that can
be rendered to HTML or summarized as ``DiffStats``.
"""

from __future__ import annotations

import html
import logging
import re

from data_designer_proposal_guard.models import DiffItem, DiffStats
from data_designer_proposal_guard.text_utils import ensure_text, is_whitespace

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"\S+|\s+")

INSERT_CLASS = "diff-insert"
DELETE_CLASS = "diff-delete"

_LARGE_TABLE_CELLS = 1_000_000


def tokenize(text: str | None) -> list[str]:
    """Split ``text`` into maximal runs of non-whitespace and whitespace.

    Joining the tokens reproduces the input exactly.
    """
    text = ensure_text(text)
    if not text:
        return []
    return _TOKEN_RE.findall(text)


def _lcs_table(old: list[str], new: list[str]) -> list[list[int]]:
    # table[i][j] is the LCS length of old[i:] and new[j:]
    n, m = len(old), len(new)
    if n * m >= _LARGE_TABLE_CELLS:
        logger.debug(f"Building {n}x{m} LCS table for word diff")
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        row, below = table[i], table[i + 1]
        token = old[i]
        for j in range(m - 1, -1, -1):
            if token == new[j]:
                row[j] = below[j + 1] + 1
            else:
                row[j] = below[j] if below[j] >= row[j + 1] else row[j + 1]
    return table


def _align(old: list[str], new: list[str]) -> list[DiffItem]:
    table = _lcs_table(old, new)
    items: list[DiffItem] = []
    deleted: list[str] = []
    inserted: list[str] = []

    def _flush() -> None:
        items.extend(DiffItem("delete", t) for t in deleted)
        items.extend(DiffItem("insert", t) for t in inserted)
        deleted.clear()
        inserted.clear()

    i = j = 0
    while i < len(old) and j < len(new):
        if old[i] == new[j]:
            _flush()
            items.append(DiffItem("equal", old[i]))
            i += 1
            j += 1
            continue
        skip_old, skip_new = table[i + 1][j], table[i][j + 1]
        # On a tie skip the greater token so swapping the inputs mirrors the path.
        if skip_old > skip_new or (skip_old == skip_new and old[i] > new[j]):
            deleted.append(old[i])
            i += 1
        else:
            inserted.append(new[j])
            j += 1
    deleted.extend(old[i:])
    inserted.extend(new[j:])
    _flush()
    return items


def diff(old_text: str | None, new_text: str | None) -> list[DiffItem]:
    """Compute the word-level edit script turning ``old_text`` into ``new_text``.

    Args:
        old_text: The earlier revision. ``None`` is treated as empty.
        new_text: The later revision. ``None`` is treated as empty.

    Returns:
        ``DiffItem`` values in reading order. Within a changed region deletions
        come before insertions. Two empty inputs give an empty list.
    """
    old = tokenize(ensure_text(old_text, "old_text"))
    new = tokenize(ensure_text(new_text, "new_text"))

    prefix = 0
    limit = min(len(old), len(new))
    while prefix < limit and old[prefix] == new[prefix]:
        prefix += 1
    suffix = 0
    while suffix < limit - prefix and old[-1 - suffix] == new[-1 - suffix]:
        suffix += 1

    head = [DiffItem("equal", t) for t in old[:prefix]]
    tail = [DiffItem("equal", t) for t in old[len(old) - suffix :]]
    middle = _align(old[prefix : len(old) - suffix], new[prefix : len(new) - suffix])
    return head + middle + tail


def render_diff_html(items: list[DiffItem]) -> str:
    """Render diff items as HTML, marking insertions and struck-through deletions."""
    parts: list[str] = []
    for item in items:
        escaped = html.escape(item.text, quote=False)
        if item.type == "insert":
            parts.append(f'<ins class="{INSERT_CLASS}">{escaped}</ins>')
        elif item.type == "delete":
            parts.append(f'<del class="{DELETE_CLASS}">{escaped}</del>')
        else:
            parts.append(escaped)
    return "".join(parts)


def get_diff_stats(items: list[DiffItem]) -> DiffStats:
    """Count added, deleted and unchanged tokens, ignoring whitespace-only items."""
    counts = {"insert": 0, "delete": 0, "equal": 0}
    for item in items:
        if is_whitespace(item.text):
            continue
        counts[item.type] += 1
    return DiffStats(additions=counts["insert"], deletions=counts["delete"], unchanged=counts["equal"])
