r"""Abstract base class for retry conditions and logical combinators."""

from __future__ import annotations

__all__ = ["And", "BaseCondition", "Not", "Or"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.context import Context


class BaseCondition(ABC):
    """Abstract base class for retry conditions.

    A condition is a pure predicate over a ``Context``: it must read time
    from the context and never from a clock, so calling ``check`` twice
    with the same context gives the same answer.

    Conditions compose with ``~`` (NOT), ``&`` (AND) and ``|`` (OR).

    Example:
        ```pycon
        >>> from aretry.conditions import MaxAttempts, exception_in
        >>> condition = ~exception_in(ValueError) & MaxAttempts(3)
        >>> print(condition)
        (not context.failure is in (ValueError)) and context.attempt_count < 3

        ```
    """

    @abstractmethod
    def check(self, context: Context) -> bool:
        """Check the condition against a failure context.

        Args:
            context: The context of the failed attempt.

        Returns:
            ``True`` if the condition holds for this context.
        """

    def describe(self, context: Context) -> str:
        """Render the condition evaluated against ``context``.

        Used for debug logging of retry decisions.

        Args:
            context: The context of the failed attempt.

        Returns:
            A human readable rendering of the evaluated condition.
        """
        return str(self)

    def __invert__(self) -> BaseCondition:
        return Not(self)

    def __and__(self, other: BaseCondition) -> BaseCondition:
        return And(self, other)

    def __or__(self, other: BaseCondition) -> BaseCondition:
        return Or(self, other)


class Not(BaseCondition):
    """Negation of a condition.

    Args:
        condition: The condition to negate.
    """

    def __init__(self, condition: BaseCondition) -> None:
        self.condition = condition

    def check(self, context: Context) -> bool:
        return not self.condition.check(context)

    def describe(self, context: Context) -> str:
        return f"(not {self.condition.describe(context)})"

    def __repr__(self) -> str:
        return f"Not({self.condition!r})"

    def __str__(self) -> str:
        return f"(not {self.condition})"


class And(BaseCondition):
    """Conjunction of two conditions.

    Both operands are evaluated, left to right.

    Args:
        left: The first condition.
        right: The second condition.
    """

    def __init__(self, left: BaseCondition, right: BaseCondition) -> None:
        self.left = left
        self.right = right

    def check(self, context: Context) -> bool:
        left = self.left.check(context)
        right = self.right.check(context)
        return left and right

    def describe(self, context: Context) -> str:
        return f"{self.left.describe(context)} and {self.right.describe(context)}"

    def __repr__(self) -> str:
        return f"And({self.left!r}, {self.right!r})"

    def __str__(self) -> str:
        return f"{self.left} and {self.right}"


class Or(BaseCondition):
    """Disjunction of two conditions.

    Args:
        left: The first condition.
        right: The second condition.
    """

    def __init__(self, left: BaseCondition, right: BaseCondition) -> None:
        self.left = left
        self.right = right

    def check(self, context: Context) -> bool:
        left = self.left.check(context)
        right = self.right.check(context)
        return left or right

    def describe(self, context: Context) -> str:
        return f"({self.left.describe(context)} or {self.right.describe(context)})"

    def __repr__(self) -> str:
        return f"Or({self.left!r}, {self.right!r})"

    def __str__(self) -> str:
        return f"({self.left} or {self.right})"
