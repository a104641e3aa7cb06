"""DID Resolver."""

from abc import ABC, abstractmethod
from typing import Dict

from keydid.did import DID_KEY_PREFIX
from keydid.document import DidDocument
from keydid.service import resolve


class DIDResolutionError(Exception):
    """Represents an error from a DID Resolver."""


class DIDMethodNotSupported(DIDResolutionError):
    """Represents a DID method not supported error."""


class DIDResolver(ABC):
    """DID Resolver interface."""

    @abstractmethod
    async def resolve(self, did: str) -> dict:
        """Resolve a DID."""

    @abstractmethod
    async def is_resolvable(self, did: str) -> bool:
        """Check to see if a DID is resolvable."""

    async def resolve_and_parse(self, did: str) -> DidDocument:
        """Resolve a DID and parse the DID document."""
        doc = await self.resolve(did)
        return DidDocument.from_dict(doc)


class DIDKeyResolver(DIDResolver):
    """did:key resolver for secp256k1 keys."""

    async def is_resolvable(self, did: str) -> bool:
        """Check to see if DID is resolvable by this resolver."""
        return did.startswith(DID_KEY_PREFIX)

    async def resolve(self, did: str) -> dict:
        """Resolve a did:key."""
        return resolve(did).to_dict()


class PrefixResolver(DIDResolver):
    """DID Resolver delegates to sub-resolvers by DID prefix."""

    def __init__(self, resolvers: Dict[str, DIDResolver]):
        """Initialize the resolver."""
        self.resolvers = resolvers

    async def is_resolvable(self, did: str) -> bool:
        """Check to see if a DID is resolvable."""
        for prefix, resolver in self.resolvers.items():
            if did.startswith(prefix):
                return await resolver.is_resolvable(did)
        return False

    async def resolve(self, did: str) -> dict:
        """Resolve a DID."""
        for prefix, resolver in self.resolvers.items():
            if did.startswith(prefix):
                return await resolver.resolve(did)

        raise DIDMethodNotSupported(f"No resolver found for DID {did}")
