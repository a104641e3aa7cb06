"""Public key input for did:key construction.

Security:
- Only public key material is handled; no generation or signing
- SEC1 point handling via the cryptography package (OpenSSL bindings)
- Compressed 33-byte keys pass through untouched; curve membership is only
  checked when a point has to be decoded (uncompressed input or
  ``to_cryptography``)
"""

from typing import Self

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from keydid.did import Did
from keydid.errors import InvalidKeyLengthError, InvalidPublicKeyError
from keydid.framing import COMPRESSED_KEY_LENGTH

UNCOMPRESSED_KEY_LENGTH = 65
UNCOMPRESSED_MARKER = 0x04


def _compress(point: ec.EllipticCurvePublicKey) -> bytes:
    return point.public_bytes(
        serialization.Encoding.X962, serialization.PublicFormat.CompressedPoint
    )


def _load_point(data: bytes) -> ec.EllipticCurvePublicKey:
    try:
        return ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256K1(), data)
    except ValueError as exc:
        raise InvalidPublicKeyError(f"not a secp256k1 point: {exc}") from exc


class PublicKey:
    """A secp256k1 public key in compressed SEC1 form.

    Accepts the shapes a host typically holds a key in and always exposes
    the 33 compressed bytes that go into a did:key.
    """

    __slots__ = ("_compressed",)

    def __init__(self, compressed: bytes) -> None:
        if len(compressed) != COMPRESSED_KEY_LENGTH:
            raise InvalidKeyLengthError(COMPRESSED_KEY_LENGTH, len(compressed))
        self._compressed = bytes(compressed)

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        """Create from SEC1 bytes.

        Args:
            data: 33-byte compressed or 65-byte uncompressed (0x04) key.

        Raises:
            InvalidKeyLengthError: If the length is neither 33 nor 65.
            InvalidPublicKeyError: If an uncompressed key is not on the curve.
        """
        data = bytes(data)
        if len(data) == COMPRESSED_KEY_LENGTH:
            return cls(data)
        if len(data) == UNCOMPRESSED_KEY_LENGTH:
            if data[0] != UNCOMPRESSED_MARKER:
                raise InvalidPublicKeyError(
                    f"uncompressed key must start with 0x04, got 0x{data[0]:02x}"
                )
            return cls(_compress(_load_point(data)))
        raise InvalidKeyLengthError(COMPRESSED_KEY_LENGTH, len(data))

    @classmethod
    def from_hex(cls, value: str) -> Self:
        """Create from a hex-encoded SEC1 key."""
        try:
            data = bytes.fromhex(value)
        except ValueError as exc:
            raise InvalidPublicKeyError(f"invalid hex: {exc}") from exc
        return cls.from_bytes(data)

    @classmethod
    def from_cryptography(cls, key: ec.EllipticCurvePublicKey) -> Self:
        """Create from a cryptography public key object."""
        if not isinstance(key.curve, ec.SECP256K1):
            raise InvalidPublicKeyError(f"expected secp256k1 curve, got {key.curve.name}")
        return cls(_compress(key))

    @classmethod
    def coerce(
        cls,
        value: "PublicKey | bytes | bytearray | memoryview | str | ec.EllipticCurvePublicKey",
    ) -> Self:
        """Build a PublicKey from any supported input form."""
        if isinstance(value, cls):
            return value
        if isinstance(value, (bytes, bytearray, memoryview)):
            return cls.from_bytes(bytes(value))
        if isinstance(value, str):
            return cls.from_hex(value)
        if isinstance(value, ec.EllipticCurvePublicKey):
            return cls.from_cryptography(value)
        raise InvalidPublicKeyError(f"unsupported key type {type(value).__name__}")

    @property
    def compressed(self) -> bytes:
        """The 33-byte compressed SEC1 encoding."""
        return self._compressed

    @property
    def did(self) -> Did:
        """Get the DID for this key."""
        return Did.from_public_key(self._compressed)

    def to_cryptography(self) -> ec.EllipticCurvePublicKey:
        """Load the key as a cryptography object, validating the point."""
        return _load_point(self._compressed)

    def hex(self) -> str:
        return self._compressed.hex()

    def __bytes__(self) -> bytes:
        return self._compressed

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self._compressed == other._compressed

    def __hash__(self) -> int:
        return hash(self._compressed)

    def __repr__(self) -> str:
        return f"PublicKey({self.hex()})"
