"""Facade - a simple interface in front of a set of subsystems."""

from typing import Optional


class Subsystem1:
    def operation1(self) -> str:
        return "Subsystem1: Ready!\n"

    def operation_n(self) -> str:
        return "Subsystem1: Go!\n"


class Subsystem2:
    def operation1(self) -> str:
        return "Subsystem2: Get ready!\n"

    def operation_z(self) -> str:
        return "Subsystem2: Fire!\n"


class Facade:
    def __init__(self, subsystem1: Optional[Subsystem1] = None,
                 subsystem2: Optional[Subsystem2] = None):
        self._subsystem1 = subsystem1 or Subsystem1()
        self._subsystem2 = subsystem2 or Subsystem2()

    def operation(self) -> str:
        result = "Facade initializes subsystems:\n"
        result += self._subsystem1.operation1()
        result += self._subsystem2.operation1()
        result += "Facade orders subsystems to perform the action:\n"
        result += self._subsystem1.operation_n()
        result += self._subsystem2.operation_z()
        return result


def demo() -> None:
    subsystem1 = Subsystem1()
    subsystem2 = Subsystem2()
    facade = Facade(subsystem1, subsystem2)

    print("Client: Using facade")
    print(facade.operation())
