"""Flyweight - share common state between many fine-grained objects."""

from abc import ABC, abstractmethod
from typing import Dict


class Flyweight(ABC):
    @abstractmethod
    def operation(self, extrinsic_state: str) -> None:
        pass


class ConcreteFlyweight(Flyweight):
    """Holds only the shared, intrinsic state."""

    def __init__(self, intrinsic_state: str):
        self._intrinsic_state = intrinsic_state

    @property
    def intrinsic_state(self) -> str:
        return self._intrinsic_state

    def operation(self, extrinsic_state: str) -> None:
        print(f"ConcreteFlyweight: Intrinsic={self._intrinsic_state}, "
              f"Extrinsic={extrinsic_state}")


class UnsharedConcreteFlyweight(Flyweight):
    """Keeps all of its state itself and is never cached."""

    def __init__(self, states: Dict[str, str]):
        self._all_states = dict(states)

    def operation(self, extrinsic_state: str) -> None:
        states = ", ".join(f"{key}={value}" for key, value in self._all_states.items())
        print(f"UnsharedConcreteFlyweight: AllStates=[{states}], "
              f"Extra Extrinsic={extrinsic_state}")


class FlyweightFactory:
    """Creates flyweights on first request and hands out the cached one afterwards."""

    def __init__(self):
        self._flyweights: Dict[str, Flyweight] = {}

    @property
    def count(self) -> int:
        return len(self._flyweights)

    def get_flyweight(self, key: str) -> Flyweight:
        if key in self._flyweights:
            print(f"FlyweightFactory: Reusing existing flyweight for key '{key}'.")
            return self._flyweights[key]

        print(f"FlyweightFactory: Creating new flyweight for key '{key}'.")
        flyweight = ConcreteFlyweight(key)
        self._flyweights[key] = flyweight
        return flyweight


def demo() -> None:
    factory = FlyweightFactory()

    fw1 = factory.get_flyweight("SharedState1")
    fw1.operation("ExtrinsicState1")

    fw2 = factory.get_flyweight("SharedState2")
    fw2.operation("ExtrinsicState2")

    # Reuses fw1
    fw3 = factory.get_flyweight("SharedState1")
    fw3.operation("ExtrinsicState3")

    unshared_states = {
        "State1": "Value1",
        "State2": "Value2",
        "State3": "Value3",
    }
    unshared_fw = UnsharedConcreteFlyweight(unshared_states)
    unshared_fw.operation("ExtraState")
