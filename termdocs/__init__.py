r"""Render structured documentation into scrollable, styled terminal rows.

This package builds an immutable document tree from external content blocks,
wraps and lays it out into fixed-width styled rows, and computes clamped
scroll viewports over them. It also exposes the CLI used to preview content
and to generate or audit syntax snapshots.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from termdocs import main
>>> main(["render", "docs/install.json"])  # doctest: +SKIP
>>> from termdocs.pipeline import wrap_plain_lines
>>> from termdocs.render_ast import TextNode
>>> wrap_plain_lines([TextNode("alpha\n\nbeta")], 20)
['alpha', '', 'beta']
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
