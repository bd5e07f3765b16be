"""Strategy - interchangeable algorithms behind one interface."""

from abc import ABC, abstractmethod


class Strategy(ABC):
    @abstractmethod
    def algorithm(self) -> None:
        pass


class ConcreteStrategyA(Strategy):
    def algorithm(self) -> None:
        print("ConcreteStrategyA algorithm")


class ConcreteStrategyB(Strategy):
    def algorithm(self) -> None:
        print("ConcreteStrategyB algorithm")


class Context:
    """Delegates its work to the current strategy."""

    def __init__(self, strategy: Strategy):
        self._strategy = strategy

    @property
    def strategy(self) -> Strategy:
        return self._strategy

    @strategy.setter
    def strategy(self, strategy: Strategy) -> None:
        self._strategy = strategy

    def set_strategy(self, strategy: Strategy) -> None:
        self._strategy = strategy

    def do_some_business_logic(self) -> None:
        self._strategy.algorithm()


def demo() -> None:
    context = Context(ConcreteStrategyA())
    print("Client: Strategy is set to ConcreteStrategyA")
    context.do_some_business_logic()

    print("\nClient: Strategy is set to ConcreteStrategyB")
    context.set_strategy(ConcreteStrategyB())
    context.do_some_business_logic()
