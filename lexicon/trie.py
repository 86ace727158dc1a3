"""Prefix trie nodes and the walks the lexicon is built on."""

from __future__ import annotations

from collections.abc import Iterator


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False

    def is_dead(self) -> bool:
        """True if nothing is stored at or below this node."""
        return not self.is_word and not self.children

    def __repr__(self) -> str:
        flag = "*" if self.is_word else ""
        return f"TrieNode{flag}({''.join(sorted(self.children))})"


def walk(root: TrieNode | None, s: str) -> TrieNode | None:
    """Node at the end of the path spelled by ``s``, or None."""
    node = root
    for ch in s:
        if node is None:
            return None
        node = node.children.get(ch)
    return node


def ensure_path(root: TrieNode, s: str) -> TrieNode:
    """Walk ``s`` from ``root``, creating missing nodes on the way."""
    node = root
    for ch in s:
        child = node.children.get(ch)
        if child is None:
            child = node.children[ch] = TrieNode()
        node = child
    return node


def trace_path(root: TrieNode | None, s: str) -> list[tuple[TrieNode, str]] | None:
    """Edges ``(parent, ch)`` followed to spell ``s``, or None if the path
    breaks off. The last edge leads to the terminal node."""
    edges: list[tuple[TrieNode, str]] = []
    node = root
    for ch in s:
        if node is None:
            return None
        edges.append((node, ch))
        node = node.children.get(ch)
    if node is None:
        return None
    return edges


def iter_subtree_words(node: TrieNode, prefix: str) -> Iterator[str]:
    """Yield every word stored at or below ``node``.

    ``prefix`` is the string spelled by the path down to ``node``. Words are
    yielded depth-first in key order using an explicit work list, so very
    long words do not hit the interpreter's recursion limit.
    """
    stack: list[tuple[TrieNode, str]] = [(node, prefix)]
    while stack:
        current, spelled = stack.pop()
        if current.is_word:
            yield spelled
        # reversed so the smallest key is popped first
        for ch in sorted(current.children, reverse=True):
            stack.append((current.children[ch], spelled + ch))


def iter_nodes(root: TrieNode | None) -> Iterator[tuple[str, TrieNode]]:
    """Yield ``(path, node)`` for every node reachable from ``root``."""
    if root is None:
        return
    stack: list[tuple[str, TrieNode]] = [("", root)]
    while stack:
        path, node = stack.pop()
        yield path, node
        for ch, child in node.children.items():
            stack.append((path + ch, child))
