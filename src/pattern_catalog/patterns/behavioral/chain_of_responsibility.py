"""Chain of Responsibility - pass a request along a chain of handlers."""

from abc import ABC, abstractmethod
from typing import Any, Optional


class Handler(ABC):
    @abstractmethod
    def set_next(self, handler: "Handler") -> "Handler":
        pass

    @abstractmethod
    def handle(self, request: Any) -> Optional[str]:
        pass


class AbstractHandler(Handler):
    """Default chaining behavior: forward to the next handler, if any."""

    def __init__(self):
        self._next_handler: Optional[Handler] = None

    def set_next(self, handler: Handler) -> Handler:
        self._next_handler = handler
        # Returning the handler allows monkey.set_next(squirrel).set_next(dog)
        return handler

    def handle(self, request: Any) -> Optional[str]:
        if self._next_handler is not None:
            return self._next_handler.handle(request)
        return None


class MonkeyHandler(AbstractHandler):
    def handle(self, request: Any) -> Optional[str]:
        if request == "Banana":
            return f"Monkey: I'll eat the {request}"
        return super().handle(request)


class SquirrelHandler(AbstractHandler):
    def handle(self, request: Any) -> Optional[str]:
        if request == "Nut":
            return f"Squirrel: I'll eat the {request}"
        return super().handle(request)


class DogHandler(AbstractHandler):
    def handle(self, request: Any) -> Optional[str]:
        if request == "MeatBall":
            return f"Dog: I'll eat the {request}"
        return super().handle(request)


def demo() -> None:
    print("Chain of Responsibility Pattern Demo:")

    monkey = MonkeyHandler()
    squirrel = SquirrelHandler()

    monkey.set_next(squirrel)

    print("Chain: Monkey > Squirrel")
    print(monkey.handle("Banana"))
    print(monkey.handle("Nut"))
