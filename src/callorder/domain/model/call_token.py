"""Call token value object and the registry that issues tokens."""

from __future__ import annotations

from dataclasses import dataclass, field

from callorder.domain.exceptions import DuplicateTokenNameError, InvalidTokenNameError


@dataclass(frozen=True, slots=True)
class CallToken:
    """Identity of one mock method (or one call site of it).

    Equality and hashing use id only. Create tokens through
    TokenRegistry.create() so names stay unique.

    Attributes:
        name: Human readable name used in failure messages
        id: Registry-assigned number (must be >= 1)
    """

    name: str = field(compare=False)
    id: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        _validate_name(self.name)
        if self.id < 1:
            raise ValueError(f"id must be >= 1, got {self.id}")

    def __str__(self) -> str:
        return self.name


def _validate_name(name: object) -> None:
    if name is None:
        raise InvalidTokenNameError(name, "Method call name must not be None.")
    if not isinstance(name, str):
        raise InvalidTokenNameError(name, f"Method call name must be a str, got {type(name).__name__}.")
    if not name.strip():
        raise InvalidTokenNameError(name, "Method call name must not be empty or whitespace.")


class TokenRegistry:
    """Issues CallTokens with unique names and increasing ids.

    One registry usually lives for the whole test session. reset() exists
    for test isolation only: tokens issued before a reset keep their ids,
    and new tokens will reuse them.
    """

    __slots__ = ("_counter", "_names")

    def __init__(self) -> None:
        self._names: set[str] = set()
        self._counter = 0

    def create(self, name: str) -> CallToken:
        """Create a token.

        Args:
            name: Unique, non-blank token name

        Returns:
            New CallToken with the next id

        Raises:
            InvalidTokenNameError: name is None, not a str, or blank.
            DuplicateTokenNameError: name already issued by this registry.
        """
        _validate_name(name)
        if name in self._names:
            raise DuplicateTokenNameError(name)

        self._counter += 1
        self._names.add(name)
        return CallToken(name=name, id=self._counter)

    def reset(self) -> None:
        """Forget all issued names and restart ids at 1."""
        self._names.clear()
        self._counter = 0

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)


# Process-wide registry for module-level token constants.
default_registry = TokenRegistry()


def call_token(name: str) -> CallToken:
    """Create a token in the process-wide default_registry."""
    return default_registry.create(name)
