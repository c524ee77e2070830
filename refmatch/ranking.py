"""
Priority queue of refactoring pairs.

Pairs come out in descending similarity. Pairs with the same similarity
are all kept and come out in the order they were pushed.
"""

import heapq
import itertools
from typing import Iterable, Iterator, List, Tuple

from .pairing import RefactoringPair, descending_similarity


class PairingQueue:
    """
    Binary heap ranked by ``descending_similarity``.

    Each heap entry carries an insertion sequence number after the rank
    key. It is only reached when ranks tie, and the heap never compares
    two pairs directly.
    """

    def __init__(self, pairs: Iterable[RefactoringPair] = ()):
        self._heap: List[Tuple[object, int, RefactoringPair]] = []
        self._counter = itertools.count()
        self.extend(pairs)

    def push(self, pair: RefactoringPair) -> None:
        heapq.heappush(self._heap, (descending_similarity(pair), next(self._counter), pair))

    def extend(self, pairs: Iterable[RefactoringPair]) -> None:
        for pair in pairs:
            self.push(pair)

    def pop(self) -> RefactoringPair:
        """
        Remove and return the highest-ranked pair.

        Raises:
            IndexError: If the queue is empty
        """
        if not self._heap:
            raise IndexError("pop from an empty pairing queue")
        return heapq.heappop(self._heap)[2]

    def peek(self) -> RefactoringPair:
        """
        Return the highest-ranked pair without removing it.

        Raises:
            IndexError: If the queue is empty
        """
        if not self._heap:
            raise IndexError("peek at an empty pairing queue")
        return self._heap[0][2]

    def drain(self) -> Iterator[RefactoringPair]:
        """Pop pairs in rank order until the queue is empty."""
        while self._heap:
            yield self.pop()

    def clear(self) -> None:
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __iter__(self) -> Iterator[RefactoringPair]:
        # Ranked snapshot, the queue itself is left untouched
        return (entry[2] for entry in sorted(self._heap))

    def __repr__(self) -> str:
        return f"PairingQueue(size={len(self._heap)})"
