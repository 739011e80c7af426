r"""Constant conditions."""

from __future__ import annotations

__all__ = ["FALSE", "TRUE", "ConstantCondition"]

from typing import TYPE_CHECKING

from aretry.conditions.base import BaseCondition

if TYPE_CHECKING:
    from aretry.context import Context


class ConstantCondition(BaseCondition):
    """Condition that always returns the same value.

    Use the ``TRUE`` and ``FALSE`` instances instead of creating new ones.

    Args:
        value: The value returned by ``check``.
    """

    def __init__(self, value: bool) -> None:
        self.value = value

    def check(self, context: Context) -> bool:  # noqa: ARG002
        return self.value

    def __repr__(self) -> str:
        return "TRUE" if self.value else "FALSE"

    def __str__(self) -> str:
        return "true" if self.value else "false"


TRUE = ConstantCondition(True)
FALSE = ConstantCondition(False)
