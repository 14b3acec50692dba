"""
counter_py.errors — structured error taxonomy for the counter contract.

Every failure raised by the codec, the store or the handler is a
``ContractError``. Errors carry a short machine-readable ``code``, a
human-readable ``message`` and an optional ``context`` mapping for RPC/CLI
wiring:

    ContractError("simple message")
    ContractError("message", code="some_code", context={...})

Hierarchy
---------
ContractError
├── EncodingError                 malformed tag / payload on encode
├── DecodingError                 malformed or corrupted address string
│   ├── MissingSeparator
│   ├── InvalidCharacter
│   ├── TagEmpty
│   ├── TagTooLong
│   ├── ChecksumMismatch
│   └── InvalidLength
├── Unauthorized                  sender is not the owner
└── StdError                      host-level failures
    ├── NotFound
    ├── AlreadyInitialized
    ├── Overflow
    ├── ParseError
    ├── SerializeError
    └── StorageError

None of these are retried; callers surface them verbatim.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional


class ContractError(Exception):
    """Base class for all contract-level errors."""

    default_code = "contract_error"

    def __init__(
        self,
        message: str = "",
        *,
        code: Optional[str] = None,
        context: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code: str = str(code or self.default_code)
        self.message: str = str(message)
        self.context: Dict[str, Any] = dict(context or {})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": dict(self.context),
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


# ---------------------------------------------------------------------------
# Codec
# ---------------------------------------------------------------------------


class EncodingError(ContractError):
    """Tag or payload rejected while building an address string."""

    default_code = "encoding_error"


class DecodingError(ContractError):
    """Address string rejected while parsing."""

    default_code = "decoding_error"


class MissingSeparator(DecodingError):
    default_code = "decoding_error.missing_separator"


class InvalidCharacter(DecodingError):
    default_code = "decoding_error.invalid_character"


class TagEmpty(DecodingError):
    default_code = "decoding_error.tag_empty"


class TagTooLong(DecodingError):
    default_code = "decoding_error.tag_too_long"


class ChecksumMismatch(DecodingError):
    default_code = "decoding_error.checksum_mismatch"


class InvalidLength(DecodingError):
    default_code = "decoding_error.invalid_length"


# ---------------------------------------------------------------------------
# Business rules
# ---------------------------------------------------------------------------


class Unauthorized(ContractError):
    default_code = "unauthorized"

    def __init__(self, message: str = "Unauthorized", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


# ---------------------------------------------------------------------------
# Host / standard errors
# ---------------------------------------------------------------------------


class StdError(ContractError):
    default_code = "std_error"


class NotFound(StdError):
    default_code = "std_error.not_found"


class AlreadyInitialized(StdError):
    default_code = "std_error.already_initialized"


class Overflow(StdError):
    default_code = "std_error.overflow"


class ParseError(StdError):
    default_code = "std_error.parse_error"


class SerializeError(StdError):
    default_code = "std_error.serialize_error"


class StorageError(StdError):
    default_code = "std_error.storage_error"


__all__ = [
    "ContractError",
    "EncodingError",
    "DecodingError",
    "MissingSeparator",
    "InvalidCharacter",
    "TagEmpty",
    "TagTooLong",
    "ChecksumMismatch",
    "InvalidLength",
    "Unauthorized",
    "StdError",
    "NotFound",
    "AlreadyInitialized",
    "Overflow",
    "ParseError",
    "SerializeError",
    "StorageError",
]
