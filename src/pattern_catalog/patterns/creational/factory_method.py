"""Factory Method - subclasses decide which product to create."""

from abc import ABC, abstractmethod
from typing import Dict, Type

from pattern_catalog.domain.base.exceptions import UnsupportedProductError


class Product(ABC):
    """Interface for products made by creators."""

    @abstractmethod
    def operation(self) -> str:
        pass


class ConcreteProductA(Product):
    def operation(self) -> str:
        return "Result of ConcreteProductA"


class ConcreteProductB(Product):
    def operation(self) -> str:
        return "Result of ConcreteProductB"


class Creator(ABC):
    """
    Declares the factory method.

    The creator's main job is not creating products: it holds business
    logic that works with whatever product the factory method returns.
    """

    @abstractmethod
    def factory_method(self) -> Product:
        pass

    def some_operation(self) -> str:
        product = self.factory_method()
        return "Creator: " + product.operation()


class ConcreteCreatorA(Creator):
    def factory_method(self) -> Product:
        return ConcreteProductA()


class ConcreteCreatorB(Creator):
    def factory_method(self) -> Product:
        return ConcreteProductB()


CREATORS: Dict[str, Type[Creator]] = {
    "A": ConcreteCreatorA,
    "B": ConcreteCreatorB,
}


def create_creator(kind: str) -> Creator:
    """
    Look up a creator by product kind.

    Args:
        kind: Product kind, 'A' or 'B' (case-insensitive)

    Returns:
        Creator for that kind

    Raises:
        UnsupportedProductError: If the kind is not recognized
    """
    key = str(kind).strip().upper()
    if key not in CREATORS:
        raise UnsupportedProductError(kind, CREATORS.keys())
    return CREATORS[key]()


def demo() -> None:
    print("App: Launched with ConcreteCreatorA.")
    creator: Creator = ConcreteCreatorA()
    print(creator.some_operation())

    print("\nApp: Launched with ConcreteCreatorB.")
    creator = ConcreteCreatorB()
    print(creator.some_operation())
