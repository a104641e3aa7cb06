"""Tests for DID handling."""

from contextlib import nullcontext
from dataclasses import astuple, dataclass, fields

import base58
import pytest

from keydid import (
    Did,
    InvalidCompressionMarkerError,
    InvalidDIDError,
    InvalidFramedLengthError,
    InvalidKeyLengthError,
    MultibaseDecodeError,
    NotDidKeyMethodError,
    UnsupportedKeyCodecError,
    UnsupportedMultibasePrefixError,
    decode_multibase,
    encode_multibase,
)

HEADER = bytes([0xE7, 0x01])
COMPRESSED_KEY = bytes([0x02]) + bytes(range(1, 33))
SECP256K1_DID = "did:key:zQ3shokFTS3brHcDQrn82RUDfCZESWL1ZdCEJwekUDPQiYBme"
ED25519_DID = "did:key:z6MkhaXgBZDvotDkL5257faiztiGiC2QtKLGpbnnEGta2doK"


def did_for_payload(payload: bytes) -> str:
    return "did:key:z" + base58.b58encode(payload).decode("ascii")


@dataclass
class DidParseTestCase:
    did_string: str
    exception: type[Exception] | None = None
    exception_pattern: str | None = None


DID_PARSE_CASES = {
    "valid did:key": DidParseTestCase(did_string=SECP256K1_DID),
    "invalid prefix did:web": DidParseTestCase(
        did_string="did:web:example.com",
        exception=NotDidKeyMethodError,
        exception_pattern="must start with",
    ),
    "method prefix checked first": DidParseTestCase(
        did_string="did:key2:zABC",
        exception=NotDidKeyMethodError,
    ),
    "invalid multibase prefix": DidParseTestCase(
        did_string="did:key:abc",
        exception=UnsupportedMultibasePrefixError,
        exception_pattern="base58btc",
    ),
    "empty key part": DidParseTestCase(
        did_string="did:key:",
        exception=UnsupportedMultibasePrefixError,
    ),
    "invalid base58 character": DidParseTestCase(
        did_string="did:key:zInvalidKey!",
        exception=MultibaseDecodeError,
        exception_pattern="invalid base58",
    ),
    "empty base58 payload": DidParseTestCase(
        did_string="did:key:z",
        exception=MultibaseDecodeError,
        exception_pattern="empty payload",
    ),
    "trailing space": DidParseTestCase(
        did_string=did_for_payload(HEADER + COMPRESSED_KEY) + " ",
        exception=MultibaseDecodeError,
        exception_pattern="illegal character",
    ),
    "trailing newline": DidParseTestCase(
        did_string=did_for_payload(HEADER + COMPRESSED_KEY) + "\n",
        exception=MultibaseDecodeError,
        exception_pattern="illegal character",
    ),
    "trailing tab": DidParseTestCase(
        did_string=did_for_payload(HEADER + COMPRESSED_KEY) + "\t",
        exception=MultibaseDecodeError,
        exception_pattern="illegal character",
    ),
    "ed25519 did:key": DidParseTestCase(
        did_string=ED25519_DID,
        exception=UnsupportedKeyCodecError,
        exception_pattern="unsupported key type",
    ),
    "too short": DidParseTestCase(
        did_string=did_for_payload(HEADER + bytes(30)),
        exception=InvalidFramedLengthError,
        exception_pattern="expected 35 bytes, got 32",
    ),
    "uncompressed marker": DidParseTestCase(
        did_string=did_for_payload(HEADER + bytes([0x04]) + bytes(32)),
        exception=InvalidCompressionMarkerError,
        exception_pattern="0x02 or 0x03",
    ),
}


@pytest.mark.parametrize(
    argnames=[field.name for field in fields(DidParseTestCase)],
    argvalues=[astuple(tc) for tc in DID_PARSE_CASES.values()],
    ids=list(DID_PARSE_CASES.keys()),
)
def test_did_parse(
    did_string: str,
    exception: type[Exception] | None,
    exception_pattern: str | None,
) -> None:
    context = (
        nullcontext()
        if exception is None
        else pytest.raises(exception, match=exception_pattern)
    )
    with context:
        did = Did.parse(did_string)
        assert len(did.public_key) == 33
        assert str(did) == did_string


class TestDid:
    def test_roundtrip(self) -> None:
        """DID can be converted to string and back."""
        original = Did.from_public_key(COMPRESSED_KEY)
        parsed = Did.parse(str(original))

        assert parsed == original
        assert parsed.public_key == COMPRESSED_KEY

    def test_key_id_format(self) -> None:
        """secp256k1 did:key identifiers start with zQ3s."""
        did = Did.from_public_key(COMPRESSED_KEY)

        assert did.key_id.startswith("zQ3s")
        assert str(did) == f"did:key:{did.key_id}"

    def test_verification_method_id(self) -> None:
        """Fragment is the multibase key."""
        did = Did.from_public_key(COMPRESSED_KEY)

        assert did.verification_method_id == f"{did}#{did.key_id}"

    def test_invalid_key_length(self) -> None:
        """Public key must be 33 bytes."""
        with pytest.raises(InvalidKeyLengthError, match="expected 33 bytes, got 32"):
            Did.from_public_key(bytes(32))

    @pytest.mark.parametrize("length", [34, 36])
    def test_framed_length_boundary(self, length: int) -> None:
        """Payloads one byte short or long carry expected=35."""
        payload = (HEADER + COMPRESSED_KEY + b"\x00")[:length]

        with pytest.raises(InvalidFramedLengthError) as info:
            Did.parse(did_for_payload(payload))

        assert info.value.expected == 35
        assert info.value.actual == length

    def test_errors_share_base(self) -> None:
        """Every resolution failure is an InvalidDIDError."""
        with pytest.raises(InvalidDIDError):
            Did.parse(ED25519_DID)

    def test_frozen(self) -> None:
        """DID is immutable."""
        did = Did.from_public_key(COMPRESSED_KEY)

        with pytest.raises(AttributeError):
            did.public_key = b"x" * 33  # type: ignore


class TestMultibase:
    def test_encode(self) -> None:
        """Encoding adds the z prefix."""
        assert encode_multibase(b"\x00\x01") == "z" + base58.b58encode(b"\x00\x01").decode()

    def test_decode(self) -> None:
        """Decoding strips the z prefix."""
        assert decode_multibase(encode_multibase(COMPRESSED_KEY)) == COMPRESSED_KEY

    def test_decode_other_base(self) -> None:
        """Non base58btc multibase strings are rejected."""
        with pytest.raises(UnsupportedMultibasePrefixError) as info:
            decode_multibase("mAQID")

        assert info.value.prefix == "m"
