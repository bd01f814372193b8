import os
import json
import time
import logging
import threading
from typing import List, Dict, Optional
from .client import KeyClient
from .metrics import keys_generated_total, key_lookups_total
from ..protocol.crypto.keys import generate_private_key, public_key_from_private
from ..protocol.crypto.addresses import address_from_pubkey
from ..protocol.types.common import CurveType, KeyServiceError, ValidationError
from ..protocol.types.identity import PublicKey

logger = logging.getLogger(__name__)

KEYSTORE_DIR = os.path.expanduser("~/.ledgerspec/keys")

class KeyStore(KeyClient):
    """Local key store: one JSON file per address.

    Names are optional but unique; unnamed keys are only reachable by address.
    """

    def __init__(self, root_dir: str = KEYSTORE_DIR):
        self.root_dir = root_dir
        self._lock = threading.RLock()
        os.makedirs(self.root_dir, exist_ok=True)

    # --- KeyClient ---
    def generate(self, name: str, curve_type: CurveType) -> str:
        key = self.create_key(name, curve_type)
        return key["address"]

    def public_key(self, address: str) -> PublicKey:
        key = self.get_key_by_address(address)
        if key is None:
            key_lookups_total.labels(outcome="unknown").inc()
            raise KeyServiceError(f"no key found for address {address}")
        key_lookups_total.labels(outcome="found").inc()
        return PublicKey(curve_type=CurveType(key["curve_type"]), key=key["public_key"])

    # --- Store management ---
    def create_key(self, name: str, curve_type: CurveType = CurveType.ED25519) -> Dict[str, str]:
        """Generates and saves a new key."""
        priv = generate_private_key()
        key_data = self._store(name, curve_type, priv)
        keys_generated_total.labels(curve_type=curve_type.value).inc()
        logger.info(f"Generated {curve_type.value} key '{name}' at {key_data['address']}")
        return key_data

    def import_key(self, name: str, private_key_hex: str,
                   curve_type: CurveType = CurveType.ED25519) -> Dict[str, str]:
        """Imports an existing private key."""
        try:
            priv = bytes.fromhex(private_key_hex)
        except ValueError:
            raise KeyServiceError("Invalid hex string")
        if len(priv) != 32:
            raise KeyServiceError("Invalid private key length")
        return self._store(name, curve_type, priv)

    def get_key(self, name: str) -> Optional[Dict[str, str]]:
        """Loads key by name."""
        if not name:
            return None
        for key in self._iter_keys():
            if key.get("name") == name:
                return key
        return None

    def get_key_by_address(self, address: str) -> Optional[Dict[str, str]]:
        path = self._key_path(address)
        if not os.path.exists(path):
            return None
        return self._read_key_file(path)

    def list_keys(self) -> List[Dict[str, str]]:
        """Lists all available keys (without private info)."""
        return [
            {
                "name": k["name"],
                "address": k["address"],
                "curve_type": k["curve_type"],
                "public_key": k["public_key"],
            }
            for k in self._iter_keys()
        ]

    def delete_key(self, name: str) -> bool:
        with self._lock:
            key = self.get_key(name)
            if key is None:
                return False
            os.remove(self._key_path(key["address"]))
            return True

    def _store(self, name: str, curve_type: CurveType, priv: bytes) -> Dict[str, str]:
        try:
            pub = public_key_from_private(priv, curve_type)
        except ValidationError as e:
            raise KeyServiceError(str(e)) from e
        addr = address_from_pubkey(pub, curve_type)

        key_data = {
            "name": name,
            "address": addr,
            "curve_type": curve_type.value,
            "public_key": pub.hex(),
            "private_key": priv.hex(),
            "created_at": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())
        }

        with self._lock:
            if name and self.get_key(name):
                raise KeyServiceError(f"Key '{name}' already exists")
            self._save_key_file(addr, key_data)
        return key_data

    def _iter_keys(self):
        for filename in sorted(os.listdir(self.root_dir)):
            if filename.endswith(".json"):
                data = self._read_key_file(os.path.join(self.root_dir, filename))
                if data:
                    yield data

    def _key_path(self, address: str) -> str:
        return os.path.join(self.root_dir, f"{address}.json")

    def _read_key_file(self, path: str) -> Optional[Dict[str, str]]:
        try:
            with open(path, "r") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Skipping unreadable key file {path}: {e}")
            return None

    def _save_key_file(self, address: str, data: Dict[str, str]):
        path = self._key_path(address)
        with open(path, "w") as f:
            json.dump(data, f, indent=2)
        # Secure permissions
        os.chmod(path, 0o600)
