"""Clamp scroll offsets and slice the visible window of laid-out rows.

The controller keeps no state: every call recomputes the viewport from the
full row sequence and the caller's requested offset. Requesting an offset far
past the end of the content is the supported way to jump to the bottom.

Example
-------
>>> from termdocs.pipeline.viewport import compute_viewport
>>> from termdocs.render_ast import spacer_row
>>> view = compute_viewport([spacer_row()] * 50, 10**18, 12)
>>> (view.scroll_offset, view.max_scroll, view.start_line, view.end_line)
(38, 38, 39, 50)
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from termdocs._constants import DEFAULT_MIN_WIDTH

from .ast_build import build_document_ast
from .layout import layout_document

if typ.TYPE_CHECKING:
    from termdocs.render_ast import StyledRow

    from .ast_build import RawMapping


@dc.dataclass(frozen=True, slots=True)
class Viewport:
    """Visible rows plus the bookkeeping a status line needs.

    Attributes
    ----------
    rows : tuple[StyledRow, ...]
        The visible slice.
    total_rows : int
        Number of rows in the whole document.
    visible_row_count : int
        Rows the host can show (at least 1).
    max_scroll : int
        Largest valid offset, ``max(0, total_rows - visible_row_count)``.
    scroll_offset : int
        Requested offset clamped into ``[0, max_scroll]``.
    start_line, end_line : int
        1-indexed inclusive range of visible lines; both ``0`` when the
        document is empty.
    """

    rows: tuple[StyledRow, ...]
    total_rows: int
    visible_row_count: int
    max_scroll: int
    scroll_offset: int
    start_line: int
    end_line: int

    @property
    def at_bottom(self) -> bool:
        """Return ``True`` when no further scrolling down is possible."""
        return self.scroll_offset >= self.max_scroll

    @property
    def status(self) -> str:
        """Return a short ``lines A-B of N`` label."""
        return f"lines {self.start_line}-{self.end_line} of {self.total_rows}"


def clamp(value: int, lower: int, upper: int) -> int:
    """Return ``value`` limited to the inclusive range ``[lower, upper]``."""
    return max(lower, min(upper, value))


def compute_viewport(
    rows: cabc.Sequence[StyledRow],
    requested_offset: int,
    visible_row_count: int,
    width: int | None = None,
) -> Viewport:
    """Clamp ``requested_offset`` and slice the visible rows.

    Parameters
    ----------
    rows : Sequence[StyledRow]
        Every row of the current document.
    requested_offset : int
        Any integer, including negatives and values beyond the content.
    visible_row_count : int
        Rows the host can display; values below 1 are treated as 1.
    width : int, optional
        Accepted for symmetry with the layout call; the controller itself is
        width-agnostic.

    Returns
    -------
    Viewport
        The freshly computed viewport.
    """
    del width
    visible = max(1, int(visible_row_count))
    total = len(rows)
    max_scroll = max(0, total - visible)
    offset = clamp(int(requested_offset), 0, max_scroll)
    return Viewport(
        rows=tuple(rows[offset : offset + visible]),
        total_rows=total,
        visible_row_count=visible,
        max_scroll=max_scroll,
        scroll_offset=offset,
        start_line=offset + 1 if total else 0,
        end_line=min(total, offset + visible),
    )


def render_viewport(
    content: RawMapping,
    slug: str,
    requested_offset: int,
    visible_row_count: int,
    width: int,
    min_width: int = DEFAULT_MIN_WIDTH,
) -> Viewport:
    """Build, lay out and window one document in a single pure call.

    Raises
    ------
    SnapshotValidationError
        Propagated from the AST build when a snapshot is missing.
    """
    document = build_document_ast(content, slug)
    rows = layout_document(document, width, min_width)
    return compute_viewport(rows, requested_offset, visible_row_count, width)


__all__ = ["Viewport", "clamp", "compute_viewport", "render_viewport"]
