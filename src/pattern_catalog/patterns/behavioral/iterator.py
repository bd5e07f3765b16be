"""Iterator - traverse a collection without exposing its representation."""

from abc import ABC, abstractmethod
from typing import Generic, Iterator as PyIterator, List, TypeVar

T = TypeVar("T")


class Iterator(ABC, Generic[T]):
    @abstractmethod
    def has_next(self) -> bool:
        pass

    @abstractmethod
    def next(self) -> T:
        pass

    @abstractmethod
    def current(self) -> T:
        pass


class Collection(ABC, Generic[T]):
    @abstractmethod
    def create_iterator(self) -> Iterator[T]:
        pass


class ConcreteCollection(Collection[T]):
    def __init__(self):
        self._items: List[T] = []

    def add_item(self, item: T) -> None:
        self._items.append(item)

    def create_iterator(self) -> "ConcreteIterator[T]":
        return ConcreteIterator(self)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        if not 0 <= index < len(self._items):
            raise IndexError(f"Collection index out of range: {index}")
        return self._items[index]

    def __iter__(self) -> PyIterator[T]:
        iterator = self.create_iterator()
        while iterator.has_next():
            yield iterator.next()


class ConcreteIterator(Iterator[T]):
    def __init__(self, collection: ConcreteCollection[T]):
        self._collection = collection
        self._current = 0

    def has_next(self) -> bool:
        return self._current < len(self._collection)

    def next(self) -> T:
        if not self.has_next():
            raise StopIteration
        item = self._collection[self._current]
        self._current += 1
        return item

    def current(self) -> T:
        return self._collection[self._current]


def demo() -> None:
    print("Iterator Pattern Demo:")
    collection: ConcreteCollection[str] = ConcreteCollection()
    collection.add_item("Item A")
    collection.add_item("Item B")
    collection.add_item("Item C")

    iterator = collection.create_iterator()

    while iterator.has_next():
        print(f"Iterating: {iterator.next()}")
