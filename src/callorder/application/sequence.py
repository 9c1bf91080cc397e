"""ValueSequence: successive stub values for a mocked dependency.

Alternative to a list side_effect on unittest.mock: the last value repeats
instead of raising StopIteration, and an optional call budget turns
unexpected extra calls into a test failure.

Usage:
    seq = ValueSequence([1, 2, 3], max_calls=4)
    mock.fetch.side_effect = seq
    mock.fetch()  # 1
    mock.fetch()  # 2
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from callorder.domain.exceptions import SequenceError

if TYPE_CHECKING:
    from collections.abc import Iterable

T = TypeVar("T")

# Cursor position before the first advance()
_BEFORE_FIRST = -1


class ValueSequence(Generic[T]):
    """Forward-only cursor over a fixed, non-empty list of values.

    Starts positioned before the first value. advance() moves forward and
    stops at the last value; there is no rewind. Every successful current()
    counts toward max_calls.
    """

    __slots__ = ("_calls", "_index", "_max_calls", "_values")

    def __init__(self, values: Iterable[T], max_calls: int | None = None) -> None:
        """Initialize sequence.

        Args:
            values: Ordered values to return. Must not be empty.
            max_calls: Max number of current() calls. None = unbounded.
                Values < 1 are reported by the first current() call.

        Raises:
            ValueError: If values is empty.
        """
        self._values: tuple[T, ...] = tuple(values)
        if not self._values:
            raise ValueError("values must not be empty")

        self._max_calls = max_calls
        self._index = _BEFORE_FIRST
        self._calls = 0

    @property
    def max_calls(self) -> int | None:
        return self._max_calls

    @property
    def calls(self) -> int:
        """Number of successful current() calls so far."""
        return self._calls

    def __len__(self) -> int:
        return len(self._values)

    def advance(self) -> None:
        """Move to the next value. Stays on the last value once reached."""
        if self._index < len(self._values) - 1:
            self._index += 1

    def current(self) -> T:
        """Return the value under the cursor without moving it.

        Raises:
            SequenceError: max_calls < 1, max_calls exceeded, or advance()
                never called.
        """
        if self._max_calls is not None:
            if self._max_calls < 1:
                raise SequenceError(f"The max call count should be greater than zero, but was {self._max_calls}.")
            if self._calls >= self._max_calls:
                raise SequenceError(
                    f"Total calls for sequence should not be greater than {self._max_calls}, "
                    f"but was {self._calls + 1}."
                )

        if self._index == _BEFORE_FIRST:
            raise SequenceError(
                "The current() method was called before positioning on the first value in the sequence."
            )

        self._calls += 1
        return self._values[self._index]

    def advance_and_get(self) -> T:
        """advance() followed by current()."""
        self.advance()
        return self.current()

    def __call__(self, *args: Any, **kwargs: Any) -> T:
        """advance_and_get(), ignoring arguments. Lets the sequence be a mock side_effect."""
        del args, kwargs  # Unused
        return self.advance_and_get()

    def __repr__(self) -> str:
        return f"ValueSequence({list(self._values)!r}, max_calls={self._max_calls!r})"
