"""CallOrderVerifier: record mock method calls, verify their relative order.

Works with any mocking library that can run a callable when a mocked method
is invoked. With unittest.mock the recorder is installed as side_effect:

    verifier = CallOrderVerifier()
    repo.load.side_effect = verifier.recording_hook(LOAD)
    repo.save.side_effect = verifier.recording_hook(SAVE)

    service.run()

    verifier.declare_order(LOAD, SAVE)
    verifier.verify()

Call numbers:
    0: first call of the token, recorded call numbers ignored.
    positive n: first call recorded with call number n. Use this to tell
        apart calls of one method with different arguments.
    negative n: the |n|-th call of the token (-1 = first, -2 = second),
        recorded call numbers ignored. Once a token is declared with a
        negative call number, every declaration of it must use one.

Single-threaded: recording and verification mutate unsynchronized state.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from unittest.mock import DEFAULT

from callorder.domain.exceptions import InvalidTokenError, VerifierError
from callorder.domain.model.call_token import CallToken
from callorder.domain.model.method_call import CallOrder, MethodCall

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

# Scan position meaning "no matching call found"
NOT_FOUND = 0


def _require_token(argument: str, token: object) -> None:
    if not isinstance(token, CallToken):
        raise InvalidTokenError(argument, type(token))


class CallRecorder:
    """Callable returned by CallOrderVerifier.recording_hook().

    Each invocation runs the optional side effect with the same arguments,
    then passes its MethodCall to the record callback.

    Returns the side effect's result, or unittest.mock.DEFAULT without one
    so a Mock keeps returning its configured return_value.
    """

    __slots__ = ("_call", "_record", "_side_effect")

    def __init__(
        self,
        record: Callable[[MethodCall], None],
        call: MethodCall,
        side_effect: Callable[..., Any] | None = None,
    ) -> None:
        if side_effect is not None and not callable(side_effect):
            raise TypeError(f"side_effect must be callable, got {type(side_effect).__name__}")

        self._record = record
        self._call = call
        self._side_effect = side_effect

    @property
    def call(self) -> MethodCall:
        """MethodCall appended on every invocation."""
        return self._call

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        result = DEFAULT
        if self._side_effect is not None:
            # Raising side effect leaves history untouched
            result = self._side_effect(*args, **kwargs)

        self._record(self._call)
        return result

    def __repr__(self) -> str:
        return f"CallRecorder({self._call.display_name})"


class CallOrderVerifier:
    """Records mock method calls and verifies expected call orders.

    Contract:
      - recording_hook() recorders append to history in invocation order
      - declare_order() only stores; all validation happens in verify()
      - verify() raises VerifierError for the first failing declaration
      - reset() returns to the just-constructed state
    """

    __slots__ = ("_expected_order", "_history", "_relative_names")

    def __init__(self) -> None:
        self._history: list[MethodCall] = []
        self._expected_order: list[CallOrder] = []
        # Token names declared at least once with a negative call number
        self._relative_names: set[str] = set()

    @property
    def history(self) -> tuple[MethodCall, ...]:
        """Recorded calls, oldest first."""
        return tuple(self._history)

    @property
    def expected_order(self) -> tuple[CallOrder, ...]:
        """Declared call orders, in declaration order."""
        return tuple(self._expected_order)

    def __len__(self) -> int:
        return len(self._history)

    # =========================================================================
    # Recording
    # =========================================================================

    def recording_hook(
        self,
        token: CallToken,
        call_number: int = 0,
        side_effect: Callable[..., Any] | None = None,
    ) -> CallRecorder:
        """Create a recorder for one mock method setup.

        Args:
            token: Token of the mocked method.
            call_number: Recorded call number. Positive values distinguish
                setups of one method with different arguments.
            side_effect: Optional callable run before recording, with the
                recorder's arguments. Its result is the recorder's result.

        Returns:
            Callable suitable as a Mock side_effect.

        Raises:
            InvalidTokenError: token is not a CallToken.
            TypeError: side_effect is given but not callable.
        """
        _require_token("token", token)
        return CallRecorder(self._record, MethodCall(token, call_number), side_effect)

    def _record(self, call: MethodCall) -> None:
        self._history.append(call)
        logger.debug("Recorded call #%d: %s", len(self._history), call.display_name)

    # =========================================================================
    # Declaration
    # =========================================================================

    def declare_order(
        self,
        first_token: CallToken,
        second_token: CallToken,
        first_call_number: int = 0,
        second_call_number: int = 0,
    ) -> None:
        """Declare that first_token must be called before second_token.

        Args:
            first_token: Token of the call expected first.
            second_token: Token of the call expected second.
            first_call_number: Call number of the first call (see module doc).
            second_call_number: Call number of the second call.

        Raises:
            InvalidTokenError: Either token is None or not a CallToken.
        """
        _require_token("first_token", first_token)
        _require_token("second_token", second_token)

        order = CallOrder(
            MethodCall(first_token, first_call_number),
            MethodCall(second_token, second_call_number),
        )
        self._expected_order.append(order)

        for call in (order.first, order.second):
            if call.is_relative:
                self._relative_names.add(call.name)

        logger.debug("Declared call order #%d: %s", len(self._expected_order), order)

    def reset(self) -> None:
        """Clear history, declared orders and relative call names."""
        self._history.clear()
        self._expected_order.clear()
        self._relative_names.clear()

    # =========================================================================
    # Verification
    # =========================================================================

    def verify(self) -> None:
        """Verify every declared call order against the recorded history.

        Raises:
            VerifierError: First declaration that is invalid or not met.
        """
        for number, order in enumerate(self._expected_order, start=1):
            self._check_declaration(order, number)
            first_position, second_position = self._find_positions(order)
            self._check_positions(order, number, first_position, second_position)

        logger.debug(
            "Verified %d call order(s) against %d recorded call(s)",
            len(self._expected_order),
            len(self._history),
        )

    def _check_declaration(self, order: CallOrder, number: int) -> None:
        """Reject self-contradictory declarations before scanning."""
        first, second = order.first, order.second
        where = _where(number)

        if order.is_self_reference:
            raise VerifierError(
                f"The first and second call{where} can't both be {first.name} with call number {first.call_number}",
                order_number=number,
            )

        for call in (first, second):
            if call.name in self._relative_names and call.call_number >= 0:
                raise VerifierError(
                    f"All instances of {call.name} should have a negative call number, "
                    f"but found {call.call_number}{where}",
                    order_number=number,
                )

        if order.is_same_token and first.call_number < 0 and first.call_number < second.call_number:
            raise VerifierError(
                f"{first.display_name} can't come before {second.display_name}{where}",
                order_number=number,
            )

    def _find_positions(self, order: CallOrder) -> tuple[int, int]:
        """Scan history once, return 1-based positions (NOT_FOUND if absent).

        Ordinal counters start at the negative call number and reach 0 on
        the target occurrence. A record matching the first token but not
        taken as the first call is still tried as the second call.
        """
        first, second = order.first, order.second
        first_counter = first.call_number
        second_counter = second.call_number
        first_position = NOT_FOUND
        second_position = NOT_FOUND

        for position, call in enumerate(self._history, start=1):
            is_first_token = call.token == first.token
            is_second_token = call.token == second.token

            if is_first_token:
                first_counter += 1
            if is_second_token:
                second_counter += 1

            if first_position == NOT_FOUND and is_first_token:
                if first_counter < 0:
                    continue
                if first.is_relative or call.call_number == first.call_number:
                    first_position = position
                    continue

            if not is_second_token:
                continue
            # Ordinal match keeps the first qualifying occurrence
            if second.is_relative and second_position != NOT_FOUND:
                continue
            if second_counter < 0:
                continue
            if second.is_relative or call.call_number == second.call_number:
                second_position = position
                if first_position != NOT_FOUND:
                    break

        return first_position, second_position

    @staticmethod
    def _check_positions(order: CallOrder, number: int, first_position: int, second_position: int) -> None:
        where = _where(number)

        for call, position in ((order.first, first_position), (order.second, second_position)):
            if position == NOT_FOUND:
                raise VerifierError(
                    f"The call sequence for {call.display_name}{where} should be greater than 0, but was {position}",
                    order_number=number,
                )

        if first_position >= second_position:
            raise VerifierError(
                f"{order.first.display_name} call sequence should be less than "
                f"{order.second.display_name} call sequence{where}, "
                f"but was {first_position} and {second_position}, respectively.",
                order_number=number,
            )


def _where(number: int) -> str:
    return f" on expected call order #{number}"
