"""Template Method - an algorithm skeleton with steps filled in by subclasses."""

from abc import ABC, abstractmethod


class AbstractClass(ABC):
    def template_method(self) -> None:
        """Run the algorithm skeleton. The order of steps is fixed."""
        self.base_operation1()
        self.required_operation1()
        self.base_operation2()
        self.hook1()
        self.required_operation2()
        self.base_operation3()
        self.hook2()

    def base_operation1(self) -> None:
        print("AbstractClass: BaseOperation1")

    def base_operation2(self) -> None:
        print("AbstractClass: BaseOperation2")

    def base_operation3(self) -> None:
        print("AbstractClass: BaseOperation3")

    @abstractmethod
    def required_operation1(self) -> None:
        pass

    @abstractmethod
    def required_operation2(self) -> None:
        pass

    # Hooks are optional extension points
    def hook1(self) -> None:
        pass

    def hook2(self) -> None:
        pass


class ConcreteClass(AbstractClass):
    def required_operation1(self) -> None:
        print("ConcreteClass: RequiredOperation1")

    def required_operation2(self) -> None:
        print("ConcreteClass: RequiredOperation2")

    def hook1(self) -> None:
        print("ConcreteClass: Hook1 override")


def demo() -> None:
    print("Template Method Pattern Demo:")
    concrete_class: AbstractClass = ConcreteClass()
    concrete_class.template_method()
