"""Visitor - add operations to a class hierarchy without changing it."""

from abc import ABC, abstractmethod
from typing import List


class Component(ABC):
    @abstractmethod
    def accept(self, visitor: "Visitor") -> None:
        pass


class ConcreteComponentA(Component):
    def accept(self, visitor: "Visitor") -> None:
        visitor.visit_concrete_component_a(self)

    def exclusive_method_of_concrete_component_a(self) -> str:
        return "A"


class ConcreteComponentB(Component):
    def accept(self, visitor: "Visitor") -> None:
        visitor.visit_concrete_component_b(self)

    def special_method_of_concrete_component_b(self) -> str:
        return "B"


class Visitor(ABC):
    @abstractmethod
    def visit_concrete_component_a(self, element: ConcreteComponentA) -> None:
        pass

    @abstractmethod
    def visit_concrete_component_b(self, element: ConcreteComponentB) -> None:
        pass


class ConcreteVisitor1(Visitor):
    def visit_concrete_component_a(self, element: ConcreteComponentA) -> None:
        print(f"Visitor1: {element.exclusive_method_of_concrete_component_a()}")

    def visit_concrete_component_b(self, element: ConcreteComponentB) -> None:
        print(f"Visitor1: {element.special_method_of_concrete_component_b()}")


class ConcreteVisitor2(Visitor):
    def visit_concrete_component_a(self, element: ConcreteComponentA) -> None:
        print(f"Visitor2: {element.exclusive_method_of_concrete_component_a()}")

    def visit_concrete_component_b(self, element: ConcreteComponentB) -> None:
        print(f"Visitor2: {element.special_method_of_concrete_component_b()}")


def client_code(components: List[Component], visitor: Visitor) -> None:
    for component in components:
        component.accept(visitor)


def demo() -> None:
    print("Visitor Pattern Demo:")

    components: List[Component] = [ConcreteComponentA(), ConcreteComponentB()]

    print("The client code works with all visitors via the base Visitor interface:")
    client_code(components, ConcreteVisitor1())

    print("\nIt allows the same client code to work with different types of visitors:")
    client_code(components, ConcreteVisitor2())
