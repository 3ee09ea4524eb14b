"""A mutable set stored as a singly linked chain of `Node` cells.

Elements are kept in the order they were first added. Every lookup is a
linear scan, so the elements only need to support ``==``; they do not have
to be hashable.

`LinkedSet` is not thread-safe. Callers sharing one across threads must
synchronize access themselves. Structural changes while an iterator is
outstanding make that iterator raise `ConcurrentModificationError` on its
next step (see ``config.check_iterator_modification``).
"""

import logging
from collections.abc import Container, Iterable, Iterator, MutableSet

import numpy as np

from linkedset.configdefaults import config
from linkedset.node import Node
from linkedset.utils import (
    ConcurrentModificationError,
    InconsistencyError,
    values_equal,
)


_logger = logging.getLogger("linkedset.linked_set")


class LinkedSetIterator(Iterator):
    """Cursor over the chain of a `LinkedSet`, from head to tail.

    The iterator is one-shot; call `LinkedSet.iterator` again to restart.
    """

    __slots__ = ("_linked_set", "_current", "_expected_modcount")

    def __init__(self, linked_set: "LinkedSet"):
        self._linked_set = linked_set
        self._current = linked_set._head
        self._expected_modcount = linked_set._modcount

    def __iter__(self) -> "LinkedSetIterator":
        return self

    def __next__(self):
        linked_set = self._linked_set
        # An exhausted iterator stays exhausted, whatever happens to the set
        if linked_set is None:
            raise StopIteration
        if (
            config.check_iterator_modification
            and linked_set._modcount != self._expected_modcount
        ):
            raise ConcurrentModificationError(
                f"{type(linked_set).__name__} changed during iteration"
            )
        current = self._current
        if current is None:
            self._linked_set = None
            raise StopIteration
        self._current = current.next
        return current.value


class LinkedSet(MutableSet):
    """Insertion-ordered set backed by a singly linked list.

    Parameters
    ----------
    iterable
        Elements to add, in order. Later duplicates are skipped.

    Notes
    -----
    ``remove`` returns a bool instead of raising ``KeyError`` for a missing
    element. Use `LinkedSet.singleton` to build a set from one element that
    happens to be iterable itself (a string, a tuple...).
    """

    __slots__ = ("_head", "_count", "_modcount")

    def __init__(self, iterable: Iterable | None = None) -> None:
        self._head: Node | None = None
        self._count = 0
        self._modcount = 0
        if iterable is not None:
            self.add_all(iterable)

    @classmethod
    def singleton(cls, element) -> "LinkedSet":
        new_set = cls()
        new_set.add(element)
        return new_set

    def _walk(self) -> Iterator:
        # Internal traversal, not subject to the fail-fast check.
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def _structure_changed(self) -> None:
        self._modcount += 1
        if config.check_invariants:
            self.check_invariants()

    def check_invariants(self) -> None:
        """Raise `InconsistencyError` if the chain is cyclic, holds two equal
        elements, or disagrees with the element count."""
        seen_nodes = set()
        seen_values = []
        current = self._head
        while current is not None:
            if id(current) in seen_nodes:
                raise InconsistencyError("The chain of the set contains a cycle")
            seen_nodes.add(id(current))
            for value in seen_values:
                if values_equal(value, current.value):
                    raise InconsistencyError(
                        f"The set holds {current.value!r} more than once"
                    )
            seen_values.append(current.value)
            current = current.next
        if len(seen_values) != self._count:
            raise InconsistencyError(
                f"The set counts {self._count} elements "
                f"but its chain holds {len(seen_values)}"
            )

    def size(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def contains(self, value) -> bool:
        current = self._head
        while current is not None:
            if values_equal(current.value, value):
                return True
            current = current.next
        return False

    def __contains__(self, value) -> bool:
        return self.contains(value)

    def iterator(self) -> LinkedSetIterator:
        return LinkedSetIterator(self)

    def __iter__(self) -> LinkedSetIterator:
        return LinkedSetIterator(self)

    def to_array(self, buffer: np.ndarray | None = None) -> np.ndarray:
        """Return the elements in iteration order as a 1-d numpy array.

        Parameters
        ----------
        buffer
            Array to fill. When it is shorter than the set, a new array with
            the same dtype is allocated instead. Entries past the last element
            of an oversized buffer are left as they were.

        Returns
        -------
        numpy.ndarray
            `buffer` or a new array; of dtype ``object`` when no buffer is
            given.
        """
        if buffer is None:
            out = np.empty(self._count, dtype=object)
        else:
            if not isinstance(buffer, np.ndarray) or buffer.ndim != 1:
                raise TypeError(
                    f"buffer must be a 1-d numpy array, got {type(buffer).__name__}"
                    f" with {getattr(buffer, 'ndim', 'no')} dimensions"
                )
            if buffer.shape[0] < self._count:
                out = np.empty(self._count, dtype=buffer.dtype)
            else:
                out = buffer

        current = self._head
        index = 0
        while current is not None:
            out[index] = current.value
            index += 1
            current = current.next
        return out

    def add(self, value) -> bool:
        """Append `value` at the tail unless an equal element is present.

        Returns whether the set changed.
        """
        prev = None
        current = self._head
        while current is not None:
            if values_equal(current.value, value):
                return False
            prev = current
            current = current.next

        new_node = Node(value)
        if prev is None:
            self._head = new_node
        else:
            prev.next = new_node
        self._count += 1
        self._structure_changed()
        return True

    def remove(self, value) -> bool:
        """Unlink the element equal to `value`.

        Returns whether it was present; a missing element is not an error.
        """
        prev = None
        current = self._head
        while current is not None:
            if values_equal(current.value, value):
                if prev is None:
                    self._head = current.next
                else:
                    prev.next = current.next
                self._count -= 1
                self._structure_changed()
                return True
            prev = current
            current = current.next
        return False

    def discard(self, value) -> None:
        self.remove(value)

    def contains_all(self, source: Iterable) -> bool:
        return all(self.contains(element) for element in source)

    def add_all(self, source: Iterable) -> bool:
        if source is self:
            return False
        modified = False
        for element in source:
            if self.add(element):
                modified = True
        return modified

    def retain_all(self, source: Iterable) -> bool:
        """Drop every element that is not in `source`, in a single pass.

        `source` only needs to support ``in``. Anything else (a generator, for
        instance) is read into a list first, and so are strings, whose ``in``
        would match substrings instead of characters.
        """
        if source is self:
            return False
        if isinstance(source, (str, bytes)) or not isinstance(source, Container):
            source = list(source)

        modified = False
        prev = None
        current = self._head
        try:
            while current is not None:
                if not _source_contains(source, current.value):
                    # prev stays put, so the next node is checked against it
                    if prev is None:
                        self._head = current.next
                    else:
                        prev.next = current.next
                    self._count -= 1
                    modified = True
                else:
                    prev = current
                current = current.next
        finally:
            if modified:
                self._structure_changed()
        return modified

    def remove_all(self, source: Iterable) -> bool:
        if source is self:
            modified = not self.is_empty()
            self.clear()
            return modified
        modified = False
        for element in source:
            if self.remove(element):
                modified = True
        return modified

    def clear(self) -> None:
        if self._head is None:
            return
        _logger.debug(f"Clearing {self._count} elements")
        self._head = None
        self._count = 0
        self._structure_changed()

    @classmethod
    def _from_distinct(cls, values: Iterable) -> "LinkedSet":
        # Links `values` in order without scanning; they must be distinct.
        new_set = cls()
        tail = None
        count = 0
        for value in values:
            node = Node(value)
            if tail is None:
                new_set._head = node
            else:
                tail.next = node
            tail = node
            count += 1
        new_set._count = count
        return new_set

    def copy(self) -> "LinkedSet":
        return self._from_distinct(self._walk())

    __copy__ = copy

    def __reduce__(self):
        # A flat list, so pickle and deepcopy never recurse along the chain
        return _rebuild_linked_set, (type(self), list(self._walk()))

    def update(self, *others: Iterable) -> None:
        for other in others:
            self.add_all(other)

    def difference_update(self, *others: Iterable) -> None:
        for other in others:
            self.remove_all(other)

    def intersection_update(self, *others: Iterable) -> None:
        for other in others:
            self.retain_all(other)

    def __ior__(self, it: Iterable) -> "LinkedSet":
        self.add_all(it)
        return self

    def __iand__(self, it: Iterable) -> "LinkedSet":
        self.retain_all(it)
        return self

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self._walk()) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._walk())!r})"


def _source_contains(source, value) -> bool:
    """Membership test of `value` in a `retain_all` source.

    Falls back to a scan with `values_equal` when ``in`` cannot answer, for
    example an unhashable value probed against a ``set`` or a numpy array
    compared inside a list.
    """
    if isinstance(source, LinkedSet):
        return source.contains(value)
    try:
        return value in source
    except (TypeError, ValueError):
        if config.strict_equality:
            raise
        return any(values_equal(element, value) for element in source)


def _rebuild_linked_set(cls, values):
    return cls._from_distinct(values)
