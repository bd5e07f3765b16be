"""Adapter - make an incompatible interface usable by the client."""

from abc import ABC, abstractmethod


class Target(ABC):
    """Interface the client code expects."""

    @abstractmethod
    def get_request(self) -> str:
        pass


class Adaptee:
    """Useful behavior behind an interface the client cannot call."""

    def get_specific_request(self) -> str:
        return "Specific request."


class Adapter(Target):
    def __init__(self, adaptee: Adaptee):
        self._adaptee = adaptee

    def get_request(self) -> str:
        return f"Adapter: {self._adaptee.get_specific_request()}"


def demo() -> None:
    adaptee = Adaptee()
    target: Target = Adapter(adaptee)

    print("Adaptee interface is incompatible with the client.")
    print("But with adapter client can call its method:")
    print(target.get_request())
