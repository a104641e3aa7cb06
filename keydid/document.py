"""
DID Document handling for did:key (secp256k1).

A did:key document is fully derived from the DID string:
- One Multikey verification method whose fragment is the multibase key
- That method referenced from all four verification relationships
- No services, timestamps or proofs
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Any, Dict, Tuple

import canonicaljson

from keydid.did import Did
from keydid.errors import SerializationError

DID_CONTEXT = (
    "https://www.w3.org/ns/did/v1",
    "https://w3id.org/security/multikey/v1",
)

MULTIKEY_TYPE = "Multikey"


def canonicalize(value: dict) -> bytes:
    """Canonical JSON (sorted keys, no whitespace) for byte-for-byte comparison."""
    try:
        return canonicaljson.encode_canonical_json(value)
    except Exception as exc:
        raise SerializationError(f"canonicalization failed: {exc}") from exc


def hash_canonical(value: dict) -> bytes:
    return hashlib.sha256(canonicalize(value)).digest()


@dataclass(frozen=True)
class VerificationMethod:
    """A verification method (public key) in a DID Document."""

    id: str
    type: str
    controller: str
    public_key_multibase: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "type": self.type,
            "controller": self.controller,
            "publicKeyMultibase": self.public_key_multibase,
        }


@dataclass(frozen=True)
class DidDocument:
    """
    A DID Document for a did:key identifier.

    Example:
        >>> did = Did.parse("did:key:zQ3s...")
        >>> doc = DidDocument.for_did(did)
        >>> doc.authentication == (doc.verification_methods[0].id,)
        True
    """

    id: str
    verification_methods: Tuple[VerificationMethod, ...]
    authentication: Tuple[str, ...]
    assertion_method: Tuple[str, ...]
    capability_invocation: Tuple[str, ...]
    capability_delegation: Tuple[str, ...]
    context: Tuple[str, ...] = DID_CONTEXT

    @classmethod
    def for_did(cls, did: Did) -> DidDocument:
        """
        Build the document for a DID.

        The DID string and key portion are used exactly as held by ``did``,
        so a parsed DID yields a document whose ``id`` equals the input.

        Args:
            did: The DID to describe

        Returns:
            The DID Document
        """
        did_string = str(did)
        key_id = did.verification_method_id

        verification_method = VerificationMethod(
            id=key_id,
            type=MULTIKEY_TYPE,
            controller=did_string,
            public_key_multibase=did.key_id,
        )

        return cls(
            id=did_string,
            verification_methods=(verification_method,),
            authentication=(key_id,),
            assertion_method=(key_id,),
            capability_invocation=(key_id,),
            capability_delegation=(key_id,),
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a JSON-serializable dictionary.

        Returns:
            DID Document as a dictionary, W3C member names
        """
        return {
            "@context": list(self.context),
            "id": self.id,
            "verificationMethod": [vm.to_dict() for vm in self.verification_methods],
            "authentication": list(self.authentication),
            "assertionMethod": list(self.assertion_method),
            "capabilityInvocation": list(self.capability_invocation),
            "capabilityDelegation": list(self.capability_delegation),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> DidDocument:
        """
        Parse a dictionary produced by ``to_dict``.

        Raises:
            SerializationError: If a member is missing or has the wrong shape
        """
        try:
            context = data["@context"]
            if isinstance(context, str):
                context = [context]
            verification_methods = tuple(
                VerificationMethod(
                    id=vm["id"],
                    type=vm["type"],
                    controller=vm["controller"],
                    public_key_multibase=vm["publicKeyMultibase"],
                )
                for vm in data["verificationMethod"]
            )
            return cls(
                id=data["id"],
                verification_methods=verification_methods,
                authentication=_references(data, "authentication"),
                assertion_method=_references(data, "assertionMethod"),
                capability_invocation=_references(data, "capabilityInvocation"),
                capability_delegation=_references(data, "capabilityDelegation"),
                context=tuple(context),
            )
        except (KeyError, TypeError) as exc:
            raise SerializationError(f"malformed DID document: {exc!r}") from exc

    def to_json(self) -> bytes:
        """Canonical JSON bytes of ``to_dict``."""
        return canonicalize(self.to_dict())

    def digest(self) -> str:
        """Hex SHA-256 of the canonical JSON."""
        return hash_canonical(self.to_dict()).hex()

    def __repr__(self) -> str:
        return f"DidDocument({self.id})"


def _references(data: Dict[str, Any], member: str) -> Tuple[str, ...]:
    values = data[member]
    if not all(isinstance(value, str) for value in values):
        raise SerializationError(f"{member} must only contain DID URL strings")
    return tuple(values)
