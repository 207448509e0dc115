"""Cyclopts CLI entrypoint for previewing and checking termdocs content.

The ``termdocs`` console script lays out a content document for a terminal
of a given size and prints the visible window, audits content files for
missing syntax snapshots, and regenerates those snapshots with Pygments.
Every option can also be set through ``TERMDOCS_*`` environment variables.

Examples
--------
Preview the bottom of a document in a 100x30 terminal:

>>> from termdocs.cli import app
>>> app(
...     ["render", "docs/install.json", "--width", "100", "--height", "30",
...      "--offset", "999999"]
... )  # doctest: +SKIP

Fail a content build that lacks snapshots:

>>> app(["check", "docs/install.json"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from rich.console import Console
from rich.markup import escape

from .config import load_viewer_config
from .content import dump_document, load_document
from .errors import TermdocsError
from .paint import paint_rows
from .pipeline import render_viewport
from .snapshots import SnapshotHighlighter, audit_document

app = App(name="termdocs", config=cyclopts.config.Env("TERMDOCS_", command=False))  # type: ignore[unknown-argument]

stderr = Console(stderr=True)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Lay out a content document and print the visible window.")
def render(
    path: Path,
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to viewer config YAML")
    ] = None,
    slug: typ.Annotated[
        str | None, Parameter(help="Override the document slug")
    ] = None,
    width: typ.Annotated[
        int | None, Parameter(help="Content width in columns")
    ] = None,
    height: typ.Annotated[
        int | None, Parameter(help="Visible rows")
    ] = None,
    offset: typ.Annotated[
        int, Parameter(help="Requested scroll offset; large values jump to the end")
    ] = 0,
    plain: typ.Annotated[
        bool, Parameter(help="Print plain text without colours")
    ] = False,
) -> None:
    """Print the visible rows of ``path`` followed by a status line.

    Parameters
    ----------
    path : Path
        JSON or YAML content document.
    config : Path or None, optional
        Viewer configuration; built-in defaults apply when omitted.
    slug : str or None, optional
        Slug passed to the AST builder; defaults to the document's own.
    width, height : int or None, optional
        Viewport geometry overriding the configuration.
    offset : int, optional
        Requested scroll offset, clamped to the valid range.
    plain : bool, optional
        Emit uncoloured text, useful for piping.
    """
    viewer = load_viewer_config(config)
    document_slug, raw = load_document(path)
    viewport = render_viewport(
        raw,
        slug or document_slug,
        offset,
        height or viewer.height,
        width or viewer.width,
        viewer.min_width,
    )
    if plain:
        for row in viewport.rows:
            print(row.text)
        print(viewport.status)
        return
    console = Console(highlight=False, soft_wrap=True)
    for line in paint_rows(viewport.rows, viewer.theme):
        console.print(line)
    console.print(viewport.status, style="dim")


@app.command(help="Report code and command blocks missing syntax snapshots.")
def check(paths: list[Path]) -> None:
    """Audit each content file and exit with status 1 when issues exist.

    Parameters
    ----------
    paths : list[Path]
        Content documents to audit.
    """
    issues: list[str] = []
    for path in paths:
        slug, raw = load_document(path)
        issues.extend(audit_document(slug, raw))
    for issue in issues:
        print(issue)
    if issues:
        sys.exit(1)
    print(f"checked {len(paths)} document(s): snapshots complete")


@app.command(help="Regenerate syntax snapshots with Pygments.")
def snapshot(
    path: Path,
    *,
    output: typ.Annotated[
        Path | None, Parameter(help="Where to write the JSON result (default: in place)")
    ] = None,
    style: typ.Annotated[
        str | None, Parameter(help="Pygments style name")
    ] = None,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to viewer config YAML")
    ] = None,
) -> None:
    """Fill ``highlightedLines``/``highlightedCommandLines`` for ``path``.

    Parameters
    ----------
    path : Path
        Content document whose code and command sources are highlighted.
    output : Path or None, optional
        Destination file; JSON documents are rewritten in place by default,
        YAML sources default to a sibling ``.json`` file.
    style : str or None, optional
        Pygments style overriding the configuration.
    config : Path or None, optional
        Viewer configuration supplying the default style.
    """
    viewer = load_viewer_config(config)
    _slug, raw = load_document(path)
    highlighter = SnapshotHighlighter(style or viewer.pygments_style)
    target = output or path.with_suffix(".json")
    dump_document(target, highlighter.snapshot_document(raw))
    print(f"wrote {_format_path(target)}")


@app.meta.default
def launcher(
    *tokens: typ.Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Configure logging, then dispatch to the requested subcommand."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    app(tokens)


def main(argv: list[str] | None = None) -> None:
    """Invoke the Cyclopts application that powers the `termdocs` command.

    Errors raised by the pipeline (for example a missing syntax snapshot)
    are reported on stderr and turned into the error's exit status.

    Examples
    --------
    >>> main(["render", "docs/install.json"])  # doctest: +SKIP
    """
    try:
        app.meta(argv)
    except TermdocsError as exc:
        stderr.print(
            f"[bold red]error:[/] {escape(str(exc))}", highlight=False, soft_wrap=True
        )
        sys.exit(exc.exit_code)


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
