r"""Condition backed by a caller-supplied function."""

from __future__ import annotations

__all__ = ["Predicate", "condition"]

from typing import TYPE_CHECKING

from aretry.conditions.base import BaseCondition

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.context import Context


class Predicate(BaseCondition):
    """Condition delegating to a function of the context.

    The function should be pure: the retry loops may evaluate it more
    than once for the same failure.

    Args:
        func: The function deciding the condition.
        name: Optional name used when rendering the condition. Defaults
            to the function name.

    Example:
        ```pycon
        >>> from aretry.conditions import Predicate
        >>> from aretry.context import Context
        >>> condition = Predicate(lambda ctx: "retry" in str(ctx.failure), name="retryable")
        >>> condition.check(Context(0.0, 0.0, 1, OSError("please retry")))
        True
        >>> print(condition)
        retryable(context)

        ```
    """

    def __init__(self, func: Callable[[Context], bool], name: str | None = None) -> None:
        self.func = func
        self.name = name if name is not None else getattr(func, "__name__", repr(func))

    def check(self, context: Context) -> bool:
        return bool(self.func(context))

    def describe(self, context: Context) -> str:
        return f"{self.name}(context)={self.check(context)}"

    def __repr__(self) -> str:
        return f"Predicate(name={self.name!r})"

    def __str__(self) -> str:
        return f"{self.name}(context)"


def condition(func: Callable[[Context], bool], name: str | None = None) -> Predicate:
    """Create a ``Predicate`` condition from a function.

    Args:
        func: The function deciding the condition.
        name: Optional name used when rendering the condition.

    Returns:
        The condition.
    """
    return Predicate(func, name=name)
