from enum import Enum

class CurveType(str, Enum):
    ED25519 = "ed25519"
    SECP256K1 = "secp256k1"

class ProtocolError(Exception):
    pass

class ValidationError(ProtocolError):
    pass

class GenesisError(ProtocolError):
    """Base class for failures while resolving genesis participants."""
    pass

class KeyServiceError(GenesisError):
    """Key generation or public key lookup failed."""
    pass

class IdentityMismatchError(GenesisError):
    def __init__(self, address: str, derived_address: str):
        self.address = address
        self.derived_address = derived_address
        super().__init__(
            f"template address {address} does not match public key derived address {derived_address}"
        )

class PermissionTranslationError(GenesisError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown permission '{name}'")
