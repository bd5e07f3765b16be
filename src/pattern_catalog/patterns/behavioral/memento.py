"""Memento - capture and restore an object's state without exposing it."""

from typing import List, Optional


class Memento:
    def __init__(self, state: Optional[str]):
        self._state = state

    def get_state(self) -> Optional[str]:
        return self._state

    def set_state(self, state: str) -> None:
        self._state = state


class Originator:
    def __init__(self):
        self._state: Optional[str] = None

    @property
    def state(self) -> Optional[str]:
        return self._state

    def set_state(self, state: str) -> None:
        print(f"Originator: Setting state to {state}")
        self._state = state

    def create_memento(self) -> Memento:
        print("Originator: Creating Memento with current state.")
        return Memento(self._state)

    def set_memento(self, memento: Memento) -> None:
        self._state = memento.get_state()
        print(f"Originator: State restored to {self._state}")


class Caretaker:
    """Keeps mementos without looking inside them."""

    def __init__(self):
        self._mementos: List[Memento] = []

    def add_memento(self, memento: Memento) -> None:
        self._mementos.append(memento)

    def get_memento(self, index: int) -> Memento:
        if not 0 <= index < len(self._mementos):
            raise IndexError(f"Memento index out of range: {index}")
        return self._mementos[index]

    def __len__(self) -> int:
        return len(self._mementos)


def demo() -> None:
    print("Memento Pattern Demo:")

    originator = Originator()
    caretaker = Caretaker()

    originator.set_state("State #1")
    caretaker.add_memento(originator.create_memento())

    originator.set_state("State #2")
    caretaker.add_memento(originator.create_memento())

    originator.set_state("State #3")

    print("\nRestoring to first saved state...")
    originator.set_memento(caretaker.get_memento(0))
