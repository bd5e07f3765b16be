"""Builder - construct a complex product step by step."""

from abc import ABC, abstractmethod
from typing import List


class Product:
    """Product assembled from named parts."""

    def __init__(self):
        self._parts: List[str] = []

    def add(self, part: str) -> None:
        self._parts.append(part)

    @property
    def parts(self) -> List[str]:
        return list(self._parts)

    def list_parts(self) -> str:
        return f"Product parts: {', '.join(self._parts)}"


class Builder(ABC):
    """Interface for the building steps."""

    @abstractmethod
    def build_part_a(self) -> None:
        pass

    @abstractmethod
    def build_part_b(self) -> None:
        pass

    @abstractmethod
    def build_part_c(self) -> None:
        pass


class ConcreteBuilder(Builder):
    """Builds a Product. A fresh product is started after each retrieval."""

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self._product = Product()

    def build_part_a(self) -> None:
        self._product.add("PartA")

    def build_part_b(self) -> None:
        self._product.add("PartB")

    def build_part_c(self) -> None:
        self._product.add("PartC")

    def get_product(self) -> Product:
        product = self._product
        self.reset()
        return product


class Director:
    """Runs building steps in a particular order."""

    def __init__(self, builder: Builder):
        self._builder = builder

    @property
    def builder(self) -> Builder:
        return self._builder

    @builder.setter
    def builder(self, builder: Builder) -> None:
        self._builder = builder

    def build_minimal_product(self) -> None:
        self._builder.build_part_a()

    def build_full_product(self) -> None:
        self._builder.build_part_a()
        self._builder.build_part_b()
        self._builder.build_part_c()


def demo() -> None:
    builder = ConcreteBuilder()
    director = Director(builder)

    print("Client: Building minimal product")
    director.build_minimal_product()
    builder.get_product()

    print("\nClient: Building full product")
    director.build_full_product()
    builder.get_product()
