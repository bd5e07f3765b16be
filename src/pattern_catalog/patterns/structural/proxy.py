"""Proxy - a stand-in that controls access to another object."""

from abc import ABC, abstractmethod
from typing import Optional


class Subject(ABC):
    @abstractmethod
    def request(self) -> None:
        pass


class RealSubject(Subject):
    def request(self) -> None:
        print("RealSubject: Handling request.")


class Proxy(Subject):
    """Creates the real subject on first use and checks access before every request."""

    def __init__(self):
        self._real_subject: Optional[RealSubject] = None

    @property
    def is_initialized(self) -> bool:
        return self._real_subject is not None

    def request(self) -> None:
        if self._real_subject is None:
            print("Proxy: Creating RealSubject.")
            self._real_subject = RealSubject()
        print("Proxy: Checking access prior to firing a real request.")
        self._real_subject.request()


def demo() -> None:
    print("Proxy Pattern Demo:")

    proxy = Proxy()
    proxy.request()
    proxy.request()
