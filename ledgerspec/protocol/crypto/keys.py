from ecdsa import SigningKey, SECP256k1, Ed25519 # type: ignore
import os
from ..types.common import CurveType, ValidationError

CURVES = {
    CurveType.ED25519: Ed25519,
    CurveType.SECP256K1: SECP256k1,
}

# Encoded public key lengths
PUBLIC_KEY_LENGTHS = {
    CurveType.ED25519: 32,    # raw Edwards point
    CurveType.SECP256K1: 33,  # compressed SEC1 point
}

def generate_private_key() -> bytes:
    """Generates a random 32-byte private key (secret scalar or Ed25519 seed)."""
    return os.urandom(32)

def public_key_from_private(priv_bytes: bytes, curve_type: CurveType = CurveType.SECP256K1) -> bytes:
    """Returns the encoded public key for a private key on the given curve."""
    if len(priv_bytes) != 32:
        raise ValidationError("Invalid private key length")
    sk = SigningKey.from_string(priv_bytes, curve=CURVES[curve_type])
    vk = sk.get_verifying_key()
    if curve_type == CurveType.ED25519:
        return vk.to_string()
    return vk.to_string("compressed")

def check_public_key(pub_bytes: bytes, curve_type: CurveType) -> bytes:
    """Checks encoded public key length for the curve, returns the key unchanged."""
    expected = PUBLIC_KEY_LENGTHS[curve_type]
    if len(pub_bytes) != expected:
        raise ValidationError(
            f"{curve_type.value} public key must be {expected} bytes, got {len(pub_bytes)}"
        )
    return pub_bytes
