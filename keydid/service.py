"""Issue and resolve secp256k1 did:key identifiers.

Both operations are pure: the same input always gives the same output or
the same error, so results can be cached by the caller keyed on the DID.
"""

import logging
from dataclasses import dataclass
from typing import Union

from cryptography.hazmat.primitives.asymmetric import ec

from keydid.did import Did
from keydid.document import DidDocument
from keydid.errors import InvalidDIDError
from keydid.keys import PublicKey

LOG = logging.getLogger(__name__)

PublicKeyInput = Union[
    PublicKey, bytes, bytearray, memoryview, str, ec.EllipticCurvePublicKey
]


@dataclass(frozen=True)
class ConstructedDid:
    """A DID together with its DID Document."""

    did: str
    document: DidDocument


def construct(public_key: PublicKeyInput) -> ConstructedDid:
    """Construct a did:key and its DID Document from a public key.

    Args:
        public_key: A secp256k1 public key; compressed or uncompressed SEC1
            bytes, their hex encoding, a ``PublicKey`` or a cryptography key.

    Raises:
        InvalidKeyError: If the key input cannot be used.
    """
    key = PublicKey.coerce(public_key)
    did = Did.from_public_key(key.compressed)
    LOG.debug("constructed did: %s", did)
    return ConstructedDid(did=str(did), document=DidDocument.for_did(did))


def resolve(did: str) -> DidDocument:
    """Resolve a did:key to its DID Document.

    Raises:
        InvalidDIDError: If the DID fails any structural check; the subclass
            names the check.
    """
    try:
        parsed = Did.parse(did)
    except InvalidDIDError as exc:
        LOG.debug("failed to resolve %s: %s", did, exc.kind.value)
        raise
    LOG.debug("resolved did: %s", did)
    return DidDocument.for_did(parsed)
