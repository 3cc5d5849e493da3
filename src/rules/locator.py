"""
Find the statement that runs immediately before a given statement.

The walk follows control flow rather than source order. A statement's
predecessor is the previous entry of the statement list holding it. When the
statement opens its list, the walk climbs to the enclosing construct, but only
through wrappers that run nothing on entry: a nested block, a label and a
`try` block. Every other construct either evaluates a header expression first
(`if`, loops, `with`, `switch` cases) or is reached by a jump (`catch`,
`finally`), and function bodies start a fresh execution, so the walk stops
there with no predecessor.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from analyzer import NodeIndex

# (parent type, field) pairs holding an ordered statement list.
STATEMENT_LISTS = frozenset(
    {
        ("Program", "body"),
        ("BlockStatement", "body"),
        ("SwitchCase", "consequent"),
    }
)

# (parent type, field) pairs whose statement runs as soon as the parent starts.
TRANSPARENT_SLOTS = frozenset(
    {
        ("BlockStatement", "body"),
        ("LabeledStatement", "body"),
        ("TryStatement", "block"),
    }
)


def find_predecessor(
    statement: Dict[str, Any], index: NodeIndex
) -> Optional[Dict[str, Any]]:
    current = statement
    while True:
        slot = index.slot(current)
        if slot is None:
            return None
        place = (slot.parent.get("type"), slot.key)

        siblings = slot.siblings()
        if siblings is not None and place in STATEMENT_LISTS:
            if slot.index > 0:
                return siblings[slot.index - 1]
            if place not in TRANSPARENT_SLOTS:
                return None
        elif place not in TRANSPARENT_SLOTS:
            return None
        current = slot.parent


__all__ = ["STATEMENT_LISTS", "TRANSPARENT_SLOTS", "find_predecessor"]
