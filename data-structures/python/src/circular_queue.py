"""Circular queue implementation.

A FIFO queue backed by a ring buffer that grows on demand. The module is
named 'circular_queue' so it does not shadow the stdlib queue module.
"""

import copy
import json
import math
from typing import TypeVar, Generic, List, Iterable, Iterator, Optional, Tuple, Union

T = TypeVar('T')

GROWTH_THRESHOLD = 1024
LARGE_GROWTH_DIVISOR = 4


class QueueDecodeError(ValueError):
    """Raised when a serialized queue cannot be decoded."""


class QueueEncodeError(ValueError):
    """Raised when a queue holds values with no JSON encoding."""


def next_capacity(capacity: int) -> int:
    """Capacity the queue grows to once `capacity` slots are full.

    Doubles below GROWTH_THRESHOLD (starting from 2 when empty), then
    grows by a quarter.
    """
    if capacity < GROWTH_THRESHOLD:
        return 2 * max(1, capacity)
    return capacity + capacity // LARGE_GROWTH_DIVISOR


class Queue(Generic[T]):
    def __init__(self, capacity: int = 0) -> None:
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 0:
            raise ValueError("capacity must be a non-negative integer")
        self._data: List[Optional[T]] = [None] * capacity
        self._head = 0
        self._tail = 0
        self._size = 0
        self._capacity = capacity

    @classmethod
    def collect(cls, items: Iterable[T]) -> 'Queue[T]':
        queue: Queue[T] = cls()
        for item in items:
            queue.enqueue(item)
        return queue

    def enqueue(self, value: T) -> None:
        if self._size == self._capacity:
            self._grow()
        self._data[self._tail] = value
        self._tail = (self._tail + 1) % self._capacity
        self._size += 1

    def dequeue(self) -> Tuple[Optional[T], bool]:
        """Remove the front element.

        Returns (value, True), or (None, False) when the queue is empty.
        """
        if self._size == 0:
            return None, False
        value = self._data[self._head]
        self._data[self._head] = None
        self._head = (self._head + 1) % self._capacity
        self._size -= 1
        return value, True

    def peek(self) -> Tuple[Optional[T], bool]:
        if self._size == 0:
            return None, False
        return self._data[self._head], True

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._data = [None] * self._capacity
        self._head = 0
        self._tail = 0
        self._size = 0

    def values(self) -> Iterator[T]:
        """Yield the live elements from front to back.

        The pass reads head, size and capacity when iteration starts; the
        queue must not be mutated until the pass is finished or abandoned.
        """
        data = self._data
        head = self._head
        capacity = self._capacity
        for i in range(self._size):
            yield data[(head + i) % capacity]

    def copy(self) -> 'Queue[T]':
        """Return an independent queue with the same elements.

        Elements are deep-copied and packed from index 0, so the clone keeps
        the capacity but not the head offset of the original.
        """
        clone: Queue[T] = type(self)(self._capacity)
        for i, value in enumerate(self.values()):
            clone._data[i] = copy.deepcopy(value)
        clone._size = self._size
        clone._tail = self._size % self._capacity if self._capacity else 0
        return clone

    def to_list(self) -> List[T]:
        return list(self.values())

    def to_json(self) -> str:
        try:
            return json.dumps(self.to_list(), allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise QueueEncodeError(f"queue is not JSON serializable: {exc}") from exc

    @classmethod
    def from_list(cls, values: List[T]) -> 'Queue[T]':
        """Build a queue whose storage is exactly `values`, front at index 0."""
        queue: Queue[T] = cls()
        queue._data = list(values)
        queue._capacity = len(queue._data)
        queue._size = queue._capacity
        queue._tail = queue._size % queue._capacity if queue._capacity else 0
        return queue

    @classmethod
    def from_json(cls, text: Union[str, bytes], element_type: Optional[type] = None) -> 'Queue[T]':
        """Decode a JSON array into a queue.

        Raises QueueDecodeError if `text` is not a JSON array, or if an
        element does not match `element_type` when one is given.
        """
        try:
            values = json.loads(text, parse_constant=_reject_constant, parse_float=_parse_finite_float)
        except QueueDecodeError:
            raise
        except (TypeError, ValueError) as exc:
            raise QueueDecodeError(f"invalid queue encoding: {exc}") from exc
        if not isinstance(values, list):
            raise QueueDecodeError(
                f"queue encoding must be a JSON array, got {type(values).__name__}"
            )
        if element_type is not None:
            values = [_check_element(value, element_type, i) for i, value in enumerate(values)]
        return cls.from_list(values)

    def _grow(self) -> None:
        new_capacity = next_capacity(self._capacity)
        new_data: List[Optional[T]] = [None] * new_capacity
        for i in range(self._size):
            new_data[i] = self._data[(self._head + i) % self._capacity]
        self._data = new_data
        self._head = 0
        self._tail = self._size
        self._capacity = new_capacity

    def __iter__(self) -> Iterator[T]:
        return self.values()

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Queue):
            return NotImplemented
        return self._size == other._size and self.to_list() == other.to_list()

    def __str__(self) -> str:
        return "Queue{" + ", ".join(str(value) for value in self.values()) + "}"

    __repr__ = __str__

    def __copy__(self) -> 'Queue[T]':
        """Same as copy(): elements are deep-copied, never shared."""
        return self.copy()

    def __deepcopy__(self, memo) -> 'Queue[T]':
        return self.copy()


def _check_element(value, element_type: type, index: int):
    # JSON booleans are ints in Python; keep them out of numeric queues.
    if isinstance(value, bool) and element_type is not bool:
        raise QueueDecodeError(f"element {index}: expected {element_type.__name__}, got bool")
    if element_type is float and isinstance(value, int):
        try:
            return float(value)
        except OverflowError as exc:
            raise QueueDecodeError(f"element {index}: integer does not fit in a float") from exc
    if not isinstance(value, element_type):
        raise QueueDecodeError(
            f"element {index}: expected {element_type.__name__}, got {type(value).__name__}"
        )
    return value


def _reject_constant(name: str):
    raise QueueDecodeError(f"invalid queue encoding: {name} is not valid JSON")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise QueueDecodeError(f"invalid queue encoding: {text} is out of float range")
    return value
