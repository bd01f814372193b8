import bech32 # type: ignore
from .hash import sha256, ripemd160
from ..types.common import CurveType
from typing import Tuple, Optional

DEFAULT_PREFIX = "lsp"

def address_hash(pub_bytes: bytes, curve_type: CurveType) -> bytes:
    """20-byte account hash of a public key.

    Ed25519 keys use the truncated SHA256 of the key, secp256k1 keys use
    RIPEMD160(SHA256(key)).
    """
    if curve_type == CurveType.ED25519:
        return sha256(pub_bytes)[:20]
    return ripemd160(sha256(pub_bytes))

def address_from_pubkey(pub_bytes: bytes, curve_type: CurveType = CurveType.SECP256K1,
                        prefix: str = DEFAULT_PREFIX) -> str:
    """Creates Bech32 address from public key."""
    h20 = address_hash(pub_bytes, curve_type)

    # Convert to 5-bit words
    five_bit_r = bech32.convertbits(h20, 8, 5)
    if five_bit_r is None:
        raise ValueError("Error converting to bech32 words")

    return bech32.bech32_encode(prefix, five_bit_r)

def decode_address(addr: str) -> Tuple[str, bytes]:
    """Decodes Bech32 address to (prefix, h20_bytes)."""
    hrp, data = bech32.bech32_decode(addr)
    if hrp is None or data is None:
        raise ValueError("Invalid bech32 address")

    decoded = bech32.convertbits(data, 5, 8, False)
    if decoded is None:
        raise ValueError("Error converting from bech32 words")

    return hrp, bytes(decoded)

def is_valid_address(addr: str, expected_prefix: Optional[str] = None) -> bool:
    try:
        hrp, data = decode_address(addr)
        if expected_prefix and hrp != expected_prefix:
            return False
        return len(data) == 20
    except ValueError:
        return False
