from typing import TypeVar, Generic, List, Iterable, Optional, Any

T = TypeVar('T')

DEFAULT_CAPACITY = 16


class _Empty:
    __slots__ = ()

    def __repr__(self) -> str:
        return "null"

    __str__ = __repr__


# Marks every slot at or beyond size.
_EMPTY: Any = _Empty()


def _check_index_type(index: Any, where: str) -> None:
    if not isinstance(index, int) or isinstance(index, bool):
        raise TypeError(f"{where}: index must be an integer")


class DynamicArray(Generic[T]):
    """Growable, indexable sequence backed by a fixed-size buffer.

    The buffer is replaced with a larger one on overflow, growing to
    ``max(minimum, capacity * 2 + 2)``. Elements always occupy slots
    ``[0, size)`` in positional order.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY,
                 elements: Optional[Iterable[T]] = None) -> None:
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 0:
            raise ValueError("capacity must be a non-negative integer")
        self._items: List[Any] = [_EMPTY] * capacity
        self._size = 0
        if elements is not None:
            for element in elements:
                self.add(element)

    def ensure_capacity(self, minimum: int) -> None:
        if minimum <= len(self._items):
            return
        new_cap = max(minimum, len(self._items) * 2 + 2)
        new_items: List[Any] = [_EMPTY] * new_cap
        for i in range(self._size):
            new_items[i] = self._items[i]
        self._items = new_items

    def capacity(self) -> int:
        return len(self._items)

    def size(self) -> int:
        return self._size

    def empty(self) -> bool:
        return self._size == 0

    def add(self, element: T) -> None:
        self.add_at(self._size, element)

    def add_at(self, index: int, element: T) -> None:
        """Insert ``element`` at ``index``, shifting later elements right.

        An index past the end appends instead of failing.
        """
        _check_index_type(index, "DynamicArray.add_at")
        if index < 0:
            raise IndexError("DynamicArray.add_at: index out of range")
        if index > self._size:
            index = self._size
        self.ensure_capacity(self._size + 1)
        for i in range(self._size, index, -1):
            self._items[i] = self._items[i - 1]
        self._items[index] = element
        self._size += 1

    def get(self, index: int) -> T:
        self._check_bounds(index, "DynamicArray.get")
        return self._items[index]

    def set(self, index: int, new_element: T) -> T:
        self._check_bounds(index, "DynamicArray.set")
        old = self._items[index]
        self._items[index] = new_element
        return old

    def remove_at(self, index: int) -> T:
        self._check_bounds(index, "DynamicArray.remove_at")
        removed = self._items[index]
        for i in range(index, self._size - 1):
            self._items[i] = self._items[i + 1]
        self._size -= 1
        self._items[self._size] = _EMPTY
        return removed

    def remove(self, element: T, default: Any = None) -> Any:
        """Remove the first element equal to ``element`` and return it.

        Returns ``default`` and leaves the array untouched when nothing
        matches. Pass a private sentinel as ``default`` to tell a missing
        element apart from a stored ``None``.
        """
        index = self._find(element)
        if index < 0:
            return default
        return self.remove_at(index)

    def clear(self) -> None:
        for i in range(self._size):
            self._items[i] = _EMPTY
        self._size = 0

    def copy(self) -> 'DynamicArray[T]':
        clone: DynamicArray[T] = DynamicArray(len(self._items))
        for i in range(self._size):
            clone._items[i] = self._items[i]
        clone._size = self._size
        return clone

    def to_list(self) -> List[T]:
        return self._items[:self._size]

    def iterator(self) -> 'DynamicArrayIterator[T]':
        return DynamicArrayIterator(self)

    def _find(self, element: Any) -> int:
        for i in range(self._size):
            if self._items[i] == element:
                return i
        return -1

    def _check_bounds(self, index: int, where: str) -> None:
        _check_index_type(index, where)
        if index < 0 or index >= self._size:
            raise IndexError(f"{where}: index out of range")

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __setitem__(self, index: int, value: T) -> None:
        self.set(index, value)

    def __contains__(self, element: Any) -> bool:
        return self._find(element) >= 0

    def __iter__(self) -> 'DynamicArrayIterator[T]':
        return DynamicArrayIterator(self)

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "[" + ",".join(str(self._items[i]) for i in range(self._size)) + "]"

    def __repr__(self) -> str:
        items = ",".join(str(item) for item in self._items)
        return f"DynamicArray(size={self._size}, capacity={len(self._items)}, items=[{items}])"


class DynamicArrayIterator(Generic[T]):
    """Forward cursor over a live DynamicArray.

    Reads through ``get`` on every step, so changes made to the array while
    iterating are visible. ``remove`` drops the element last returned and
    keeps the cursor on the element that slid into its place.
    """

    def __init__(self, array: DynamicArray[T]) -> None:
        self._array = array
        self._current = 0
        self._can_remove = False

    def has_next(self) -> bool:
        return self._current < self._array.size()

    def __iter__(self) -> 'DynamicArrayIterator[T]':
        return self

    def __next__(self) -> T:
        if not self.has_next():
            self._can_remove = False
            raise StopIteration
        value = self._array.get(self._current)
        self._current += 1
        self._can_remove = True
        return value

    def remove(self) -> T:
        if not self._can_remove:
            raise RuntimeError("DynamicArrayIterator.remove: no current element")
        self._can_remove = False
        self._current -= 1
        return self._array.remove_at(self._current)

