"""Command - turn a request into a standalone object."""

from abc import ABC, abstractmethod
from typing import Optional


class Command(ABC):
    @abstractmethod
    def execute(self) -> None:
        pass


class SimpleCommand(Command):
    """Does its own simple work."""

    def __init__(self, payload: str):
        self._payload = payload

    def execute(self) -> None:
        print(f"SimpleCommand: {self._payload}")


class Receiver:
    """Holds the business logic that complex commands delegate to."""

    def do_something(self, a: str) -> None:
        print(f"Receiver: Working on ({a}.)")

    def do_something_else(self, b: str) -> None:
        print(f"Receiver: Also working on ({b}.)")


class ComplexCommand(Command):
    def __init__(self, receiver: Receiver, a: str, b: str):
        self._receiver = receiver
        self._a = a
        self._b = b

    def execute(self) -> None:
        self._receiver.do_something(self._a)
        self._receiver.do_something_else(self._b)


class Invoker:
    """Runs the commands set for the start and the end of its work."""

    def __init__(self):
        self._on_start: Optional[Command] = None
        self._on_finish: Optional[Command] = None

    def set_on_start(self, command: Command) -> None:
        self._on_start = command

    def set_on_finish(self, command: Command) -> None:
        self._on_finish = command

    def do_something_important(self) -> None:
        if self._on_start is not None:
            self._on_start.execute()
        if self._on_finish is not None:
            self._on_finish.execute()


def demo() -> None:
    invoker = Invoker()
    invoker.set_on_start(SimpleCommand("Say Hi!"))

    receiver = Receiver()
    invoker.set_on_finish(ComplexCommand(receiver, "Send email", "Save report"))

    print("Client: Running command pattern")
    invoker.do_something_important()
