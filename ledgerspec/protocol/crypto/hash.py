import hashlib

def sha256(data: bytes) -> bytes:
    """Returns SHA256 hash of bytes."""
    return hashlib.sha256(data).digest()

def ripemd160(data: bytes) -> bytes:
    """Returns RIPEMD160 hash of bytes."""
    h = hashlib.new('ripemd160')
    h.update(data)
    return h.digest()
