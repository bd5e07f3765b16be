"""Prototype - create objects by copying an existing instance."""

from abc import ABC, abstractmethod


class Prototype(ABC):
    def __init__(self, id: int):
        self.id = id

    @abstractmethod
    def clone(self) -> "Prototype":
        pass


class ConcretePrototype1(Prototype):
    def clone(self) -> "ConcretePrototype1":
        return ConcretePrototype1(self.id)


class ConcretePrototype2(Prototype):
    def clone(self) -> "ConcretePrototype2":
        return ConcretePrototype2(self.id)


def demo() -> None:
    p1 = ConcretePrototype1(1)
    c1 = p1.clone()

    print(f"Original object id: {p1.id}")
    print(f"Cloned object id: {c1.id}")
