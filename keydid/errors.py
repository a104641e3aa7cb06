"""Error types for keydid.

Every failure of the framing and resolution pipeline has its own exception
class and a matching ``ErrorKind``. Context is kept on attributes so callers
can assert on it; the message is built from the kind and its fields.
"""

from enum import Enum
from typing import ClassVar


class ErrorKind(Enum):
    """Closed set of failure kinds."""

    INVALID_KEY_LENGTH = "invalid_key_length"
    INVALID_PUBLIC_KEY = "invalid_public_key"
    NOT_DID_KEY_METHOD = "not_did_key_method"
    UNSUPPORTED_MULTIBASE_PREFIX = "unsupported_multibase_prefix"
    MULTIBASE_DECODE_ERROR = "multibase_decode_error"
    INVALID_FRAMED_LENGTH = "invalid_framed_length"
    UNSUPPORTED_KEY_CODEC = "unsupported_key_codec"
    INVALID_COMPRESSION_MARKER = "invalid_compression_marker"
    SERIALIZATION_ERROR = "serialization_error"


class KeyDIDError(Exception):
    """Base exception for keydid operations."""

    kind: ClassVar[ErrorKind]


class InvalidKeyError(KeyDIDError):
    """Public key input could not be used."""


class InvalidKeyLengthError(InvalidKeyError):
    """Public key has the wrong number of bytes."""

    kind = ErrorKind.INVALID_KEY_LENGTH

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Invalid key length: expected {expected} bytes, got {actual}")


class InvalidPublicKeyError(InvalidKeyError):
    """Public key is not a usable secp256k1 key."""

    kind = ErrorKind.INVALID_PUBLIC_KEY

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid public key: {reason}")


class InvalidDIDError(KeyDIDError):
    """DID string failed validation."""


class NotDidKeyMethodError(InvalidDIDError):
    kind = ErrorKind.NOT_DID_KEY_METHOD

    def __init__(self, did: str) -> None:
        self.did = did
        super().__init__(f"Invalid DID format: must start with 'did:key:', got {did!r}")


class UnsupportedMultibasePrefixError(InvalidDIDError):
    kind = ErrorKind.UNSUPPORTED_MULTIBASE_PREFIX

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        super().__init__(
            f"Invalid DID format: must use base58btc encoding (z prefix), got {prefix!r}"
        )


class MultibaseDecodeError(InvalidDIDError):
    kind = ErrorKind.MULTIBASE_DECODE_ERROR

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid DID format: invalid base58 encoding: {reason}")


class InvalidFramedLengthError(InvalidDIDError):
    kind = ErrorKind.INVALID_FRAMED_LENGTH

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Invalid DID format: expected {expected} bytes, got {actual}")


class UnsupportedKeyCodecError(InvalidDIDError):
    """Key bytes carry a multicodec header for another key type."""

    kind = ErrorKind.UNSUPPORTED_KEY_CODEC

    def __init__(self, codec: bytes) -> None:
        self.codec = bytes(codec)
        super().__init__(
            "Invalid DID format: unsupported key type "
            f"(expected secp256k1 multicodec 0xe701, got 0x{self.codec.hex()})"
        )


class InvalidCompressionMarkerError(InvalidDIDError):
    kind = ErrorKind.INVALID_COMPRESSION_MARKER

    def __init__(self, marker: int) -> None:
        self.marker = marker
        super().__init__(
            "Invalid DID format: compressed public key must start with 0x02 or 0x03, "
            f"got 0x{marker:02x}"
        )


class SerializationError(KeyDIDError):
    """Serialization or canonicalization failed."""

    kind = ErrorKind.SERIALIZATION_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(f"Serialization error: {message}")
