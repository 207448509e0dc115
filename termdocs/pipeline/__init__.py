"""Build, wrap, lay out and window documentation for terminal display."""

from .ast_build import build_document_ast, to_block_node, to_inline_nodes
from .layout import layout_block, layout_document
from .runs import inline_nodes_to_plain, inline_nodes_to_runs
from .syntax_tokens import SyntaxToken, parse_syntax_token_line, syntax_token_colors
from .viewport import Viewport, compute_viewport, render_viewport
from .wrap import wrap_inline, wrap_plain_lines, wrap_runs

__all__ = [
    "SyntaxToken",
    "Viewport",
    "build_document_ast",
    "compute_viewport",
    "inline_nodes_to_plain",
    "inline_nodes_to_runs",
    "layout_block",
    "layout_document",
    "parse_syntax_token_line",
    "render_viewport",
    "syntax_token_colors",
    "to_block_node",
    "to_inline_nodes",
    "wrap_inline",
    "wrap_plain_lines",
    "wrap_runs",
]
