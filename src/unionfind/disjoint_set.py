# Copyright 2020 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

# https://en.wikipedia.org/wiki/Disjoint-set_data_structure

"""Disjoint-set forest over a fixed universe of hashable elements.

Groups are never materialized; each one is identified by its root. Callers test
whether two elements share a group by comparing their find() results.

There is deliberately no union by rank: union(a, b) always puts a's root under
b's root, so a bad union order can build a tall tree. Path compression in find()
flattens it again.
"""

from typing import Dict, Generic, Hashable, Iterable, List, TypeVar

T = TypeVar("T", bound=Hashable)


class UnknownElementError(KeyError):
    """Raised for an element that was not part of the universe at construction."""

    def __init__(self, element):
        super().__init__(element)
        self.element = element

    def __str__(self):
        return f"{self.element!r} is not an element of this DisjointSet"


class DisjointSet(Generic[T]):
    def __init__(self, elements: Iterable[T]):
        self._parent: Dict[T, T] = {e: e for e in elements}

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, e) -> bool:
        return e in self._parent

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._parent!r})"

    def _check(self, e: T):
        if e not in self._parent:
            raise UnknownElementError(e)

    # find with full path compression
    def find(self, e: T) -> T:
        self._check(e)
        path: List[T] = []
        parent = self._parent[e]
        # nan and other elements that != themselves are roots by identity
        while parent is not e and parent != e:
            path.append(e)
            e = parent
            parent = self._parent[e]
        for child in path:
            self._parent[child] = e
        return e

    # no union by rank, the first root always joins the second
    def union(self, x: T, y: T):
        self._check(x)
        self._check(y)
        x_root = self.find(x)
        y_root = self.find(y)
        if x_root is y_root or x_root == y_root:
            return  # already in the same set
        self._parent[x_root] = y_root
