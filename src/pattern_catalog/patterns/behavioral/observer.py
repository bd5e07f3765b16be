"""Observer - notify dependents when a subject's state changes."""

from abc import ABC, abstractmethod
from typing import List


class Observer(ABC):
    @abstractmethod
    def update(self, subject: "Subject") -> None:
        pass


class Subject:
    """Keeps its observers in attach order and notifies them on request."""

    def __init__(self):
        self._observers: List[Observer] = []
        self.state: int = 0

    @property
    def observers(self) -> List[Observer]:
        return list(self._observers)

    def attach(self, observer: Observer) -> None:
        self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self) -> None:
        for observer in list(self._observers):
            observer.update(self)


class ConcreteObserverA(Observer):
    def update(self, subject: Subject) -> None:
        print(f"ConcreteObserverA reacted to state {subject.state}")


class ConcreteObserverB(Observer):
    """Only interested in even states."""

    def update(self, subject: Subject) -> None:
        if subject.state % 2 == 0:
            print(f"ConcreteObserverB reacted to state {subject.state}")


def demo() -> None:
    subject = Subject()
    observer_a = ConcreteObserverA()
    subject.attach(observer_a)

    print("Client: Changing subject state to 1")
    subject.state = 1
    subject.notify()

    print("\nClient: Changing subject state to 2")
    subject.state = 2
    subject.notify()
