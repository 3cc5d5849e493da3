"""
Parent links for esprima dictionary ASTs.

esprima's `toDict` output has no parent pointers, so `NodeIndex` walks the tree
once and remembers, for every node, the node holding it, the field it sits in
and, when that field is a list, its position. Nodes are keyed by identity; the
index keeps a reference to the root so the ids stay valid.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional


@dataclass(frozen=True)
class NodeSlot:
    """Where a node sits inside its parent."""

    parent: Dict[str, Any]
    key: str
    index: Optional[int] = None

    def siblings(self) -> Optional[List[Any]]:
        """The list holding the node, or None for a single-node field."""
        if self.index is None:
            return None
        return self.parent.get(self.key)


class NodeIndex:
    def __init__(self, root: Dict[str, Any]) -> None:
        self.root = root
        self._slots: Dict[int, NodeSlot] = {}
        self._build()

    def _build(self) -> None:
        stack = [self.root]
        while stack:
            node = stack.pop()
            for key, value in node.items():
                if key in {"loc", "range"}:
                    continue
                if isinstance(value, dict) and "type" in value:
                    self._slots[id(value)] = NodeSlot(parent=node, key=key)
                    stack.append(value)
                elif isinstance(value, list):
                    for position, element in enumerate(value):
                        if isinstance(element, dict) and "type" in element:
                            self._slots[id(element)] = NodeSlot(
                                parent=node, key=key, index=position
                            )
                            stack.append(element)

    def slot(self, node: Dict[str, Any]) -> Optional[NodeSlot]:
        return self._slots.get(id(node))

    def parent(self, node: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        slot = self.slot(node)
        return slot.parent if slot else None

    def ancestors(self, node: Dict[str, Any]) -> Iterator[Dict[str, Any]]:
        """Yield the parents of `node`, innermost first, up to the root."""
        current = self.parent(node)
        while current is not None:
            yield current
            current = self.parent(current)

    def __contains__(self, node: Any) -> bool:
        return isinstance(node, dict) and (node is self.root or id(node) in self._slots)


__all__ = ["NodeIndex", "NodeSlot"]
