"""Interpreter - evaluate sentences of a small grammar."""

from abc import ABC, abstractmethod
from typing import Dict

from pattern_catalog.domain.base.exceptions import UnknownVariableError


class Expression(ABC):
    @abstractmethod
    def interpret(self, context: Dict[str, int]) -> int:
        pass


class NumberExpression(Expression):
    """Terminal expression for integer literals."""

    def __init__(self, number: int):
        self._number = number

    def interpret(self, context: Dict[str, int]) -> int:
        return self._number


class VariableExpression(Expression):
    """Terminal expression resolved from the context."""

    def __init__(self, name: str):
        self._name = name

    def interpret(self, context: Dict[str, int]) -> int:
        if self._name not in context:
            raise UnknownVariableError(self._name)
        return context[self._name]


class AddExpression(Expression):
    """Non-terminal expression for addition."""

    def __init__(self, left: Expression, right: Expression):
        self._left = left
        self._right = right

    def interpret(self, context: Dict[str, int]) -> int:
        return self._left.interpret(context) + self._right.interpret(context)


def demo() -> None:
    print("Interpreter Pattern Demo:")

    # 5 + (10 + 20)
    expression = AddExpression(
        NumberExpression(5),
        AddExpression(
            NumberExpression(10),
            NumberExpression(20),
        ),
    )

    context: Dict[str, int] = {}
    print(f"5 + (10 + 20) = {expression.interpret(context)}")
