"""Decentralized Identifier (DID) handling.

Format: did:key:z<base58btc(multicodec_prefix + compressed_secp256k1_key)>

Uses the did:key method (W3C) with secp256k1 keys.
- Multicodec prefix: 0xe701 (secp256k1 public key)
- Multibase prefix: z (base58btc)
"""

from dataclasses import dataclass

import base58

from keydid.errors import (
    InvalidKeyLengthError,
    MultibaseDecodeError,
    NotDidKeyMethodError,
    UnsupportedMultibasePrefixError,
)
from keydid.framing import COMPRESSED_KEY_LENGTH, frame, unframe

DID_KEY_PREFIX = "did:key:"

# Multibase prefix for base58btc
BASE58BTC_PREFIX = "z"

BASE58_ALPHABET = frozenset(base58.BITCOIN_ALPHABET.decode("ascii"))


def encode_multibase(data: bytes) -> str:
    """Encode bytes as a base58btc multibase string."""
    encoded = base58.b58encode(data).decode("ascii")
    return f"{BASE58BTC_PREFIX}{encoded}"


def decode_multibase(value: str) -> bytes:
    """Decode a base58btc multibase string.

    Raises:
        UnsupportedMultibasePrefixError: If the value does not start with 'z'.
        MultibaseDecodeError: If the payload is empty or not valid base58.
    """
    if not value.startswith(BASE58BTC_PREFIX):
        raise UnsupportedMultibasePrefixError(value[:1])

    payload = value[len(BASE58BTC_PREFIX) :]
    # b58decode strips trailing whitespace; reject it here instead
    for char in payload:
        if char not in BASE58_ALPHABET:
            raise MultibaseDecodeError(f"illegal character {char!r}")

    try:
        decoded = base58.b58decode(payload)
    except ValueError as exc:
        raise MultibaseDecodeError(str(exc)) from exc

    if not decoded:
        raise MultibaseDecodeError("empty payload")
    return decoded


@dataclass(frozen=True, slots=True)
class Did:
    """A parsed DID (did:key method).

    Attributes:
        public_key: The 33-byte compressed secp256k1 public key.
        key_id: The multibase-encoded key portion, as it appears in the DID.
    """

    public_key: bytes
    key_id: str

    def __post_init__(self) -> None:
        if len(self.public_key) != COMPRESSED_KEY_LENGTH:
            raise InvalidKeyLengthError(COMPRESSED_KEY_LENGTH, len(self.public_key))

    @classmethod
    def from_public_key(cls, public_key: bytes) -> "Did":
        """Create a DID from a compressed secp256k1 public key."""
        return cls(public_key=bytes(public_key), key_id=encode_multibase(frame(public_key)))

    @classmethod
    def parse(cls, did_string: str) -> "Did":
        """Parse a did:key string.

        Checks run in order and the first failure is raised: method prefix,
        multibase prefix, base58 payload, then the framed key (codec,
        length, compression marker). The key portion is kept verbatim.

        Args:
            did_string: A did:key formatted string.

        Returns:
            A Did instance.

        Raises:
            InvalidDIDError: If the format is invalid (one subclass per check).
        """
        if not did_string.startswith(DID_KEY_PREFIX):
            raise NotDidKeyMethodError(did_string)

        key_part = did_string[len(DID_KEY_PREFIX) :]
        decoded = decode_multibase(key_part)
        public_key = unframe(decoded)
        return cls(public_key=public_key, key_id=key_part)

    @property
    def verification_method_id(self) -> str:
        """DID URL of the key's verification method."""
        return f"{self}#{self.key_id}"

    def __str__(self) -> str:
        return f"{DID_KEY_PREFIX}{self.key_id}"

    def __repr__(self) -> str:
        return f"Did({self})"
