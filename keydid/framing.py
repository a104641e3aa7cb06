"""Multicodec framing of secp256k1 public keys.

Framed layout: 0xe7 0x01 (varint-encoded secp256k1-pub) followed by the
33-byte compressed SEC1 point.
"""

from keydid.errors import (
    InvalidCompressionMarkerError,
    InvalidFramedLengthError,
    InvalidKeyLengthError,
    UnsupportedKeyCodecError,
)

# secp256k1 public key multicodec prefix (varint-encoded 0xe7)
MULTICODEC_SECP256K1_PUB = bytes([0xE7, 0x01])

COMPRESSED_KEY_LENGTH = 33
FRAMED_KEY_LENGTH = len(MULTICODEC_SECP256K1_PUB) + COMPRESSED_KEY_LENGTH

# Leading byte of a compressed point: parity of y
COMPRESSION_MARKERS = frozenset({0x02, 0x03})


def frame(public_key: bytes) -> bytes:
    """Prepend the secp256k1 multicodec header to a compressed public key.

    Raises:
        InvalidKeyLengthError: If the key is not 33 bytes.
    """
    if len(public_key) != COMPRESSED_KEY_LENGTH:
        raise InvalidKeyLengthError(COMPRESSED_KEY_LENGTH, len(public_key))
    return MULTICODEC_SECP256K1_PUB + bytes(public_key)


def unframe(framed: bytes) -> bytes:
    """Strip and check the multicodec header, returning the compressed key.

    The header is compared as soon as two bytes are available, so a key of
    another type (e.g. Ed25519, 0xed01, 34 bytes) reports its codec rather
    than a length mismatch. The curve point itself is not validated.

    Raises:
        InvalidFramedLengthError: If the payload is not 35 bytes.
        UnsupportedKeyCodecError: If the header is not 0xe701.
        InvalidCompressionMarkerError: If the key does not start with 0x02/0x03.
    """
    header_length = len(MULTICODEC_SECP256K1_PUB)
    if len(framed) < header_length:
        raise InvalidFramedLengthError(FRAMED_KEY_LENGTH, len(framed))

    codec = framed[:header_length]
    if codec != MULTICODEC_SECP256K1_PUB:
        raise UnsupportedKeyCodecError(codec)

    if len(framed) != FRAMED_KEY_LENGTH:
        raise InvalidFramedLengthError(FRAMED_KEY_LENGTH, len(framed))

    marker = framed[header_length]
    if marker not in COMPRESSION_MARKERS:
        raise InvalidCompressionMarkerError(marker)

    return bytes(framed[header_length:])
