"""keydid - did:key identifiers for secp256k1 public keys.

Deterministic issuance and resolution of did:key DIDs and their DID Documents.

Example:
    >>> from keydid import construct, resolve
    >>> result = construct("0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798")
    >>> resolve(result.did) == result.document
    True
"""

from keydid.did import Did, decode_multibase, encode_multibase
from keydid.document import (
    DidDocument,
    VerificationMethod,
    canonicalize,
    hash_canonical,
)
from keydid.errors import (
    ErrorKind,
    InvalidCompressionMarkerError,
    InvalidDIDError,
    InvalidFramedLengthError,
    InvalidKeyError,
    InvalidKeyLengthError,
    InvalidPublicKeyError,
    KeyDIDError,
    MultibaseDecodeError,
    NotDidKeyMethodError,
    SerializationError,
    UnsupportedKeyCodecError,
    UnsupportedMultibasePrefixError,
)
from keydid.framing import MULTICODEC_SECP256K1_PUB, frame, unframe
from keydid.keys import PublicKey
from keydid.resolver import (
    DIDKeyResolver,
    DIDMethodNotSupported,
    DIDResolutionError,
    DIDResolver,
    PrefixResolver,
)
from keydid.service import ConstructedDid, construct, resolve

__version__ = "0.1.0"

__all__ = [
    # Core
    "construct",
    "resolve",
    "ConstructedDid",
    "Did",
    "PublicKey",
    # Framing
    "MULTICODEC_SECP256K1_PUB",
    "frame",
    "unframe",
    "encode_multibase",
    "decode_multibase",
    # Document
    "DidDocument",
    "VerificationMethod",
    "canonicalize",
    "hash_canonical",
    # Resolver
    "DIDResolver",
    "DIDKeyResolver",
    "PrefixResolver",
    "DIDResolutionError",
    "DIDMethodNotSupported",
    # Errors
    "ErrorKind",
    "KeyDIDError",
    "InvalidKeyError",
    "InvalidKeyLengthError",
    "InvalidPublicKeyError",
    "InvalidDIDError",
    "NotDidKeyMethodError",
    "UnsupportedMultibasePrefixError",
    "MultibaseDecodeError",
    "InvalidFramedLengthError",
    "UnsupportedKeyCodecError",
    "InvalidCompressionMarkerError",
    "SerializationError",
]
