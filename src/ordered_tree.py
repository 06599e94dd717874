"""
OrderedTree -- an unbalanced binary search tree with full node removal.

Values are kept in strictly ascending in-order sequence under their natural
ordering; equal values are rejected instead of stored twice. Deletion splices
the matched node out of its owning slot (the tree's root slot or a parent's
child slot). A node with two children keeps its place and takes over the value
of its in-order successor, whose own node is unlinked instead.

Every descent is an explicit loop, so a degenerate tree built from sorted input
is only limited by memory and not by the interpreter's recursion limit.
"""

import logging
from typing import TypeVar, Generic, Callable, Iterable, Iterator, List, Optional, Tuple

T = TypeVar('T')

logger = logging.getLogger(__name__)


class OrderedTreeError(Exception):
    """Base class for errors reported by OrderedTree operations."""

    def __init__(self, value: object, message: str) -> None:
        super().__init__(message)
        self.value = value


class DuplicateInsert(OrderedTreeError):
    def __init__(self, value: object) -> None:
        super().__init__(value, f"value already present: {value!r}")


class ValueNotFound(OrderedTreeError):
    def __init__(self, value: object) -> None:
        super().__init__(value, f"value not found: {value!r}")


class _Slot:
    """Handle to the attribute that holds a subtree.

    The owner is either the tree itself (attribute ``_root``) or a node
    (attribute ``left`` or ``right``).
    """

    __slots__ = ("_owner", "_attr")

    def __init__(self, owner: object, attr: str) -> None:
        self._owner = owner
        self._attr = attr

    def get(self) -> Optional['OrderedTree.Node']:
        return getattr(self._owner, self._attr)

    def take(self) -> Optional['OrderedTree.Node']:
        return self.replace(None)

    def replace(self, node: Optional['OrderedTree.Node']) -> Optional['OrderedTree.Node']:
        previous = getattr(self._owner, self._attr)
        setattr(self._owner, self._attr, node)
        return previous

    def __repr__(self) -> str:
        return f"_Slot({type(self._owner).__name__}.{self._attr})"


class OrderedTree(Generic[T]):
    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['OrderedTree.Node'] = None
            self.right: Optional['OrderedTree.Node'] = None

        def __repr__(self) -> str:
            return f"Node({self.value!r})"

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._root: Optional[OrderedTree.Node] = None
        self._size: int = 0
        if values is not None:
            for value in values:
                self.insert(value)

    def _find_slot(self, value: T) -> _Slot:
        """Return the slot holding ``value``, or the empty slot where it belongs."""
        slot = _Slot(self, "_root")
        node = slot.get()
        while node is not None:
            if value < node.value:
                slot = _Slot(node, "left")
            elif value > node.value:
                slot = _Slot(node, "right")
            else:
                break
            node = slot.get()
        return slot

    def insert(self, value: T) -> None:
        if value != value:
            raise ValueError(f"value is not equal to itself and has no place in a total order: {value!r}")

        slot = self._find_slot(value)
        if slot.get() is not None:
            logger.debug("rejected duplicate insert of %r", value)
            raise DuplicateInsert(value)

        slot.replace(OrderedTree.Node(value))
        self._size += 1
        logger.debug("attached %r at %r", value, slot)

    def contains(self, value: T) -> bool:
        node = self._find_slot(value).get()
        return node is not None and node.value == value

    def delete(self, value: T) -> T:
        """Remove ``value`` from the tree and return the stored value.

        Raises ValueNotFound, leaving the tree untouched, when no node holds
        an equal value.
        """
        slot = self._find_slot(value)
        node = slot.get()
        if node is None or node.value != value:
            logger.debug("delete of %r found nothing", value)
            raise ValueNotFound(value)

        if node.left is not None and node.right is not None:
            removed = self._delete_with_successor(node)
            self._size -= 1
            return removed

        if node.left is None and node.right is None:
            slot.take()
            logger.debug("deleted leaf %r", value)
        elif node.right is None:
            slot.replace(node.left)
            logger.debug("deleted %r, left subtree moved up", value)
        else:
            slot.replace(node.right)
            logger.debug("deleted %r, right subtree moved up", value)

        node.left = None
        node.right = None
        self._size -= 1
        return node.value

    def _delete_with_successor(self, node: Node) -> T:
        # The successor has no left child; its right subtree takes its slot.
        successor_slot = _Slot(node, "right")
        successor = successor_slot.get()
        assert successor is not None
        while successor.left is not None:
            successor_slot = _Slot(successor, "left")
            successor = successor.left

        successor_slot.replace(successor.right)
        successor.right = None
        node.value, successor.value = successor.value, node.value
        logger.debug("deleted %r, successor %r promoted", successor.value, node.value)
        return successor.value

    def traverse_in_order(self, visit: Callable[[T], None] = print) -> None:
        """Call ``visit`` on every value in ascending order."""
        stack: List[OrderedTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            visit(node.value)
            node = node.right

    def in_order(self) -> List[T]:
        result: List[T] = []
        self.traverse_in_order(result.append)
        return result

    def pre_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[OrderedTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def post_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[OrderedTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def min(self) -> T:
        if self._root is None:
            raise ValueError("min from empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def max(self) -> T:
        if self._root is None:
            raise ValueError("max from empty tree")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def height(self) -> int:
        height = 0
        level: List[OrderedTree.Node] = [self._root] if self._root is not None else []
        while level:
            height += 1
            level = [child for node in level for child in (node.left, node.right) if child is not None]
        return height

    def is_valid(self) -> bool:
        """Check BST ordering over the whole tree and the cached size."""
        count = 0
        # (node, lower bound, upper bound); None means unbounded
        stack: List[Tuple[OrderedTree.Node, Optional[T], Optional[T]]] = []
        if self._root is not None:
            stack.append((self._root, None, None))
        while stack:
            node, low, high = stack.pop()
            if low is not None and not low < node.value:
                return False
            if high is not None and not node.value < high:
                return False
            count += 1
            if node.left is not None:
                stack.append((node.left, low, node.value))
            if node.right is not None:
                stack.append((node.right, node.value, high))
        return count == self._size

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"OrderedTree({self.in_order()})"

    def __str__(self) -> str:
        return f"OrderedTree(size={self._size}, height={self.height()})"


__all__ = ["OrderedTree", "OrderedTreeError", "DuplicateInsert", "ValueNotFound"]
