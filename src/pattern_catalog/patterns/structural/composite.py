"""Composite - treat individual objects and trees of objects uniformly."""

from abc import ABC, abstractmethod
from typing import List


class Component(ABC):
    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def add(self, component: "Component") -> None:
        pass

    @abstractmethod
    def remove(self, component: "Component") -> None:
        pass

    @abstractmethod
    def display(self, depth: int) -> None:
        """Print this node indented by `depth` dashes."""
        pass


class Composite(Component):
    def __init__(self, name: str):
        super().__init__(name)
        self._children: List[Component] = []

    @property
    def children(self) -> List[Component]:
        return list(self._children)

    def add(self, component: Component) -> None:
        self._children.append(component)

    def remove(self, component: Component) -> None:
        self._children.remove(component)

    def display(self, depth: int) -> None:
        print("-" * depth + self.name)
        for component in self._children:
            component.display(depth + 2)


class Leaf(Component):
    """Tree node without children. Add and remove only print a refusal."""

    def add(self, component: Component) -> None:
        print("Cannot add to a leaf")

    def remove(self, component: Component) -> None:
        print("Cannot remove from a leaf")

    def display(self, depth: int) -> None:
        print("-" * depth + self.name)


def demo() -> None:
    print("Composite Pattern Demo:")

    root = Composite("Root")
    branch1 = Composite("Branch 1")
    branch2 = Composite("Branch 2")

    leaf1 = Leaf("Leaf 1")
    leaf2 = Leaf("Leaf 2")
    leaf3 = Leaf("Leaf 3")

    root.add(branch1)
    root.add(branch2)
    branch1.add(leaf1)
    branch1.add(leaf2)
    branch2.add(leaf3)

    root.display(1)
