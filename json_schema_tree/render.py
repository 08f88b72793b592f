"""
Text outline of a parsed schema tree.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from .nodes import SchemaNode

CURRENT_DIR = Path(__file__).parent


def render_tree(root: SchemaNode, show_refs: bool = False) -> str:
    """Render an indented outline of root and its descendants.

    Each line holds the node label, its type, its title when set and,
    with show_refs, the reference in scope for the node.
    """
    jinja_env = jinja2.Environment(lstrip_blocks=True, trim_blocks=True)
    template = jinja_env.from_string((CURRENT_DIR / "templates" / "tree.txt.jinja2").read_text(encoding="utf-8"))
    return template.render(root=root, show_refs=show_refs)
