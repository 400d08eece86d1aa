"""Union-Find data structure for question clustering.

This module provides a DisjointSet over an arena of integer indices. Each
distinct question id is mapped to an index once; all find/union work happens
on plain lists, and ids are mapped back when groups are emitted.
"""

import logging
from collections.abc import Hashable, Iterable
from typing import Any

logger = logging.getLogger(__name__)


class DisjointSet:
    """Union-Find with path compression and union by size.

    Both operations run in O(α(n)) amortised time, where α is the inverse
    Ackermann function (effectively constant).
    """

    def __init__(self, elements: Iterable[Hashable] = ()) -> None:
        """Initialize the disjoint set, optionally seeding it with elements.

        Args:
            elements: Elements to add as singleton sets, in order

        """
        self._index: dict[Hashable, int] = {}
        self._elements: list[Hashable] = []
        self._parent: list[int] = []
        self._size: list[int] = []
        self._count = 0
        for element in elements:
            self.make_set(element)

    def make_set(self, x: Hashable) -> int:
        """Add element x as a singleton set if it is not already present.

        Args:
            x: Element to add

        Returns:
            Arena index of x

        """
        idx = self._index.get(x)
        if idx is not None:
            return idx

        idx = len(self._elements)
        self._index[x] = idx
        self._elements.append(x)
        self._parent.append(idx)
        self._size.append(1)
        self._count += 1
        return idx

    def _find_index(self, idx: int) -> int:
        root = idx
        while self._parent[root] != root:
            root = self._parent[root]

        # Path compression
        while self._parent[idx] != root:
            self._parent[idx], idx = root, self._parent[idx]

        return root

    def _lookup(self, x: Hashable) -> int:
        idx = self._index.get(x)
        if idx is None:
            raise ValueError(f"Element {x} not found in disjoint set")
        return idx

    def find(self, x: Hashable) -> Any:
        """Find the representative of the set containing x.

        Args:
            x: Element to find

        Returns:
            Representative element of the set containing x

        Raises:
            ValueError: If x was never added

        """
        return self._elements[self._find_index(self._lookup(x))]

    def union(self, x: Hashable, y: Hashable) -> bool:
        """Merge the sets containing x and y.

        Args:
            x: First element
            y: Second element

        Returns:
            True if the sets were merged, False if they were already in the same set

        """
        root_x = self._find_index(self._lookup(x))
        root_y = self._find_index(self._lookup(y))

        if root_x == root_y:
            return False

        # Union by size: attach the smaller tree under the larger one
        if self._size[root_x] < self._size[root_y]:
            root_x, root_y = root_y, root_x

        self._parent[root_y] = root_x
        self._size[root_x] += self._size[root_y]
        self._count -= 1
        return True

    def get_size(self, x: Hashable) -> int:
        """Get the size of the set containing x."""
        return self._size[self._find_index(self._lookup(x))]

    def is_same_set(self, x: Hashable, y: Hashable) -> bool:
        """Check if x and y are in the same set."""
        return self._find_index(self._lookup(x)) == self._find_index(self._lookup(y))

    def get_set_count(self) -> int:
        """Get the total number of disjoint sets."""
        return self._count

    def groups(self) -> list[list[Any]]:
        """Return every set as a list of its members.

        Members keep insertion order inside each group, and groups are ordered
        by the first-inserted member, so the result is deterministic for a
        deterministic insertion order.

        Returns:
            List of groups, one list of elements per disjoint set

        """
        by_root: dict[int, list[Any]] = {}
        for idx, element in enumerate(self._elements):
            by_root.setdefault(self._find_index(idx), []).append(element)
        return list(by_root.values())

    def __len__(self) -> int:
        """Get the total number of elements."""
        return len(self._elements)

    def __contains__(self, x: object) -> bool:
        """Check if element x is in the disjoint set."""
        return x in self._index
