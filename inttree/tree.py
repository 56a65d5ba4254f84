"""Binary search tree of integers that keeps duplicate values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """A tree node holding one integer and links to its two children."""

    value: int
    left: Node | None = None
    right: Node | None = None


def _find_leftmost(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _delete_one(root: Node | None, value: int) -> tuple[Node | None, bool]:
    """Delete the first node holding ``value`` found by search from ``root``.

    Returns the new subtree root and whether a node was deleted.
    """
    parent: Node | None = None
    node = root
    while node is not None and node.value != value:
        parent = node
        node = node.left if value < node.value else node.right

    if node is None:
        return root, False

    if node.left is None:
        replacement = node.right
    elif node.right is None:
        replacement = node.left
    else:
        successor = _find_leftmost(node.right)
        node.value = successor.value
        node.right, _ = _delete_one(node.right, successor.value)
        return root, True

    if parent is None:
        return replacement, True
    if parent.left is node:
        parent.left = replacement
    else:
        parent.right = replacement
    return root, True


def _remove_all(root: Node | None, value: int) -> tuple[Node | None, int]:
    """Delete every node holding ``value``; return the new root and the count."""
    count = 0
    while True:
        root, removed = _delete_one(root, value)
        if not removed:
            return root, count
        count += 1


class IntBinaryTree:
    """A binary search tree of integers; equal values are placed on the left."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        for value in values:
            self.push(value)

    def push(self, value: int) -> None:
        """Insert ``value``, descending left on ``<=`` and right otherwise."""
        new_node = Node(value)
        if self.root is None:
            self.root = new_node
            return
        node = self.root
        while True:
            if value <= node.value:
                if node.left is None:
                    node.left = new_node
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return
                node = node.right

    def clear(self) -> None:
        """Remove every value from the tree."""
        self.root = None

    def preorder(self) -> Iterator[int]:
        """Yield values node first, then the left and right subtrees."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def inorder(self) -> Iterator[int]:
        """Yield values left subtree first, then the node, then the right subtree."""
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def postorder(self) -> Iterator[int]:
        """Yield values of both subtrees before the node itself."""
        for node in self._postorder_nodes():
            yield node.value

    def levels(self) -> list[list[int]]:
        """Return the values of each depth level, left to right, top down."""
        return [[node.value for node in level] for level in self._node_levels()]

    def remove(self, value: int) -> int:
        """Remove every occurrence of ``value``; return how many were removed."""
        self.root, count = _remove_all(self.root, value)
        return count

    def remove_duplicates(self) -> None:
        """Keep a single node for each distinct value."""
        for node in self._postorder_nodes():
            node.left, _ = _remove_all(node.left, node.value)
            node.right, _ = _remove_all(node.right, node.value)

    def height(self) -> int:
        """Return the number of levels in the tree."""
        return sum(1 for _ in self._node_levels())

    def increment(self) -> IntBinaryTree:
        """Add one to every value in place and return the tree."""
        for level in self._node_levels():
            for node in level:
                node.value += 1
        return self

    def copy(self) -> IntBinaryTree:
        """Return an independent tree with the same shape and values."""
        clone = IntBinaryTree()
        if self.root is None:
            return clone
        clone.root = Node(self.root.value)
        stack = [(self.root, clone.root)]
        while stack:
            source, target = stack.pop()
            if source.left is not None:
                target.left = Node(source.left.value)
                stack.append((source.left, target.left))
            if source.right is not None:
                target.right = Node(source.right.value)
                stack.append((source.right, target.right))
        return clone

    def render(self) -> str:
        """Draw the tree sideways: right subtree above, left subtree below."""
        lines: list[str] = []
        stack: list[tuple[Node, int]] = []
        node = self.root
        depth = 0
        while stack or node is not None:
            while node is not None:
                stack.append((node, depth))
                node = node.right
                depth += 1
            node, depth = stack.pop()
            prefix = "    " * depth
            if depth == 0:
                lines.append(f"{prefix}{node.value}")
            else:
                lines.append(f"{prefix}|--{node.value}")
            node = node.left
            depth += 1
        return "".join(f"{line}\n" for line in lines)

    def __str__(self) -> str:
        return self.render()

    def __bool__(self) -> bool:
        return self.root is not None

    def _node_levels(self) -> Iterator[list[Node]]:
        level = [self.root] if self.root is not None else []
        while level:
            yield level
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]

    def _postorder_nodes(self) -> list[Node]:
        if self.root is None:
            return []
        stack = [self.root]
        visited: list[Node] = []
        while stack:
            node = stack.pop()
            visited.append(node)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        visited.reverse()
        return visited