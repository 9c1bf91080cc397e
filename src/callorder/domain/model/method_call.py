"""Recorded method call and expected call order value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from callorder.domain.model.call_token import CallToken


def display_name(token: CallToken, call_number: int) -> str:
    """Format token name with its call number.

    0 -> "name", positive n -> "name[n]", negative n -> "name[+|n|]".
    """
    if call_number == 0:
        return token.name
    if call_number < 0:
        return f"{token.name}[+{-call_number}]"
    return f"{token.name}[{call_number}]"


@dataclass(frozen=True, slots=True)
class MethodCall:
    """One mock method call, recorded or expected.

    Attributes:
        token: Token of the called mock method
        call_number: 0 = unspecified, positive = exact qualifier,
            negative = ordinal occurrence (expected calls only)
    """

    token: CallToken
    call_number: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.token is None:
            raise TypeError("token must not be None")

    @property
    def name(self) -> str:
        return self.token.name

    @property
    def display_name(self) -> str:
        return display_name(self.token, self.call_number)

    @property
    def is_relative(self) -> bool:
        """True when call_number selects the n-th occurrence."""
        return self.call_number < 0

    def __str__(self) -> str:
        return self.display_name


@dataclass(frozen=True, slots=True)
class CallOrder:
    """Expected order of two method calls within one test.

    Attributes:
        first: Call that must happen first
        second: Call that must happen after first
    """

    first: MethodCall
    second: MethodCall

    @property
    def is_self_reference(self) -> bool:
        """Both sides name the same token and call number."""
        return self.first == self.second

    @property
    def is_same_token(self) -> bool:
        return self.first.token == self.second.token

    def __str__(self) -> str:
        return f"{self.first.display_name} -> {self.second.display_name}"
