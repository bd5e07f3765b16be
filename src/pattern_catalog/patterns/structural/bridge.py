"""Bridge - split an abstraction from its implementation so both can vary."""

from abc import ABC, abstractmethod


class Implementation(ABC):
    @abstractmethod
    def operation_implementation(self) -> str:
        pass


class ConcreteImplementationA(Implementation):
    def operation_implementation(self) -> str:
        return "ConcreteImplementationA: Result"


class ConcreteImplementationB(Implementation):
    def operation_implementation(self) -> str:
        return "ConcreteImplementationB: Result"


class Abstraction:
    """Control layer that delegates the real work to an implementation."""

    def __init__(self, implementation: Implementation):
        self.implementation = implementation

    def operation(self) -> str:
        return ("Abstract: Base operation with:\n"
                + self.implementation.operation_implementation())


class ExtendedAbstraction(Abstraction):
    def operation(self) -> str:
        return ("ExtendedAbstraction: Extended operation with:\n"
                + self.implementation.operation_implementation())


def demo() -> None:
    implementation: Implementation = ConcreteImplementationA()
    abstraction = Abstraction(implementation)
    print(abstraction.operation())

    implementation = ConcreteImplementationB()
    abstraction = ExtendedAbstraction(implementation)
    print("\n" + abstraction.operation())
