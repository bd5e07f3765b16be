"""Abstract Factory - families of related products without naming concrete classes."""

from abc import ABC, abstractmethod
from typing import Dict, Type

from pattern_catalog.domain.base.exceptions import UnsupportedProductError


class AbstractProductA(ABC):
    @abstractmethod
    def useful_function_a(self) -> str:
        pass


class AbstractProductB(ABC):
    @abstractmethod
    def useful_function_b(self) -> str:
        pass

    @abstractmethod
    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        """Collaborate with a product A of the same family."""
        pass


class ConcreteProductA1(AbstractProductA):
    def useful_function_a(self) -> str:
        return "Product A1"


class ConcreteProductA2(AbstractProductA):
    def useful_function_a(self) -> str:
        return "Product A2"


class ConcreteProductB1(AbstractProductB):
    def useful_function_b(self) -> str:
        return "Product B1"

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        return f"Product B1 collaborating with ({collaborator.useful_function_a()})"


class ConcreteProductB2(AbstractProductB):
    def useful_function_b(self) -> str:
        return "Product B2"

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        return f"Product B2 collaborating with ({collaborator.useful_function_a()})"


class AbstractFactory(ABC):
    """Interface for factories producing one family of products."""

    @abstractmethod
    def create_product_a(self) -> AbstractProductA:
        pass

    @abstractmethod
    def create_product_b(self) -> AbstractProductB:
        pass


class ConcreteFactory1(AbstractFactory):
    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA1()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB1()


class ConcreteFactory2(AbstractFactory):
    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA2()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB2()


FACTORIES: Dict[str, Type[AbstractFactory]] = {
    "1": ConcreteFactory1,
    "2": ConcreteFactory2,
}


def get_factory(family: str) -> AbstractFactory:
    """Return the factory for a product family, raising UnsupportedProductError if unknown."""
    key = str(family).strip()
    if key not in FACTORIES:
        raise UnsupportedProductError(family, FACTORIES.keys())
    return FACTORIES[key]()


def demo() -> None:
    print("Client: Testing client code with ConcreteFactory1")
    factory1: AbstractFactory = ConcreteFactory1()
    product_a1 = factory1.create_product_a()
    factory1.create_product_b()
    print(product_a1.useful_function_a())

    print("\nClient: Testing the same client code with ConcreteFactory2")
    factory2: AbstractFactory = ConcreteFactory2()
    product_a2 = factory2.create_product_a()
    factory2.create_product_b()
    print(product_a2.useful_function_a())
