"""callorder - mock method call order verification and stub value sequences."""

__version__ = "0.1.0"

from callorder.application.sequence import ValueSequence
from callorder.application.verifier import CallOrderVerifier, CallRecorder
from callorder.domain.exceptions import (
    CallOrderError,
    DuplicateTokenNameError,
    InvalidTokenError,
    InvalidTokenNameError,
    SequenceError,
    VerifierError,
)
from callorder.domain.model.call_token import CallToken, TokenRegistry, call_token, default_registry

__all__ = [
    "CallOrderError",
    "CallOrderVerifier",
    "CallRecorder",
    "CallToken",
    "DuplicateTokenNameError",
    "InvalidTokenError",
    "InvalidTokenNameError",
    "SequenceError",
    "TokenRegistry",
    "ValueSequence",
    "VerifierError",
    "__version__",
    "call_token",
    "default_registry",
]
