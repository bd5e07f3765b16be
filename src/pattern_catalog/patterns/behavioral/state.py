"""State - an object changes behavior when its internal state changes."""

from abc import ABC, abstractmethod


class State(ABC):
    @abstractmethod
    def handle(self, context: "Context") -> None:
        pass


class Context:
    def __init__(self, state: State):
        self._state = state
        self.transition_to(state)

    @property
    def state(self) -> State:
        return self._state

    def transition_to(self, state: State) -> None:
        print(f"Context: Transition to {type(state).__name__}")
        self._state = state

    def request(self) -> None:
        self._state.handle(self)


class ConcreteStateA(State):
    def handle(self, context: Context) -> None:
        print("ConcreteStateA handles request.")
        context.transition_to(ConcreteStateB())


class ConcreteStateB(State):
    def handle(self, context: Context) -> None:
        print("ConcreteStateB handles request.")
        context.transition_to(ConcreteStateA())


def demo() -> None:
    print("State Pattern Demo:")
    context = Context(ConcreteStateA())

    context.request()
    context.request()
    context.request()
