import hashlib
from typing import Dict, List, Tuple
from .client import KeyClient
from .metrics import keys_generated_total, key_lookups_total
from ..protocol.crypto.keys import public_key_from_private
from ..protocol.types.common import CurveType, KeyServiceError
from ..protocol.types.identity import PublicKey

class MockKeyClient(KeyClient):
    """In-memory key client with deterministic keys.

    The n-th generated key is derived from (seed, n), so two clients with the
    same seed hand out the same addresses. Calls are recorded in ``calls``.
    """

    def __init__(self, seed: str = "ledgerspec"):
        self.seed = seed
        self.keys: Dict[str, PublicKey] = {}
        self.names: Dict[str, str] = {}
        self.calls: List[Tuple[str, str]] = []

    def add_key(self, pub: PublicKey, name: str = "") -> str:
        address = pub.address()
        self.keys[address] = pub
        if name:
            self.names[name] = address
        return address

    def generate(self, name: str, curve_type: CurveType) -> str:
        self.calls.append(("generate", name))
        if name and name in self.names:
            raise KeyServiceError(f"Key '{name}' already exists")
        priv = hashlib.sha256(f"{self.seed}/{len(self.keys)}".encode("utf-8")).digest()
        pub = PublicKey.from_bytes(public_key_from_private(priv, curve_type), curve_type)
        keys_generated_total.labels(curve_type=curve_type.value).inc()
        return self.add_key(pub, name)

    def public_key(self, address: str) -> PublicKey:
        self.calls.append(("public_key", address))
        pub = self.keys.get(address)
        if pub is None:
            key_lookups_total.labels(outcome="unknown").inc()
            raise KeyServiceError(f"no key found for address {address}")
        key_lookups_total.labels(outcome="found").inc()
        return pub

    def call_count(self, method: str) -> int:
        return sum(1 for m, _ in self.calls if m == method)
