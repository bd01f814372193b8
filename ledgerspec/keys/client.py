from abc import ABC, abstractmethod
from ..protocol.types.common import CurveType
from ..protocol.types.identity import PublicKey

class KeyClient(ABC):
    """Capability interface of a key management service.

    Implementations raise KeyServiceError for every failure so resolution
    code can propagate a single error kind.
    """

    @abstractmethod
    def generate(self, name: str, curve_type: CurveType) -> str:
        """Creates and persists a new keypair, returns its address."""

    @abstractmethod
    def public_key(self, address: str) -> PublicKey:
        """Returns the public key for a known address."""
