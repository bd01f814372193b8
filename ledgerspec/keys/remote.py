import logging
import requests
from .client import KeyClient
from .metrics import keys_generated_total, key_lookups_total
from ..protocol.types.common import CurveType, KeyServiceError
from ..protocol.types.identity import PublicKey

logger = logging.getLogger(__name__)

DEFAULT_KEYS_URL = "http://localhost:10997"

class RemoteKeyClient(KeyClient):
    """Key client for a key service reachable over HTTP.

    POST {url}/generate           {"name", "curve_type"} -> {"address"}
    GET  {url}/public-key/<addr>  -> {"curve_type", "public_key"}
    """

    def __init__(self, url: str = DEFAULT_KEYS_URL, timeout: float = 10.0):
        self.url = url.rstrip("/")
        self.timeout = timeout

    def generate(self, name: str, curve_type: CurveType) -> str:
        try:
            resp = requests.post(
                f"{self.url}/generate",
                json={"name": name, "curve_type": curve_type.value},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise KeyServiceError(f"key service unreachable: {e}") from e
        if resp.status_code != 200:
            raise KeyServiceError(f"could not generate key '{name}': {resp.text}")
        try:
            address = resp.json()["address"]
        except (ValueError, KeyError) as e:
            raise KeyServiceError(f"malformed generate response: {resp.text}") from e
        keys_generated_total.labels(curve_type=curve_type.value).inc()
        logger.info(f"Key service generated {curve_type.value} key '{name}' at {address}")
        return address

    def public_key(self, address: str) -> PublicKey:
        try:
            resp = requests.get(f"{self.url}/public-key/{address}", timeout=self.timeout)
        except requests.RequestException as e:
            key_lookups_total.labels(outcome="error").inc()
            raise KeyServiceError(f"key service unreachable: {e}") from e
        if resp.status_code == 404:
            key_lookups_total.labels(outcome="unknown").inc()
            raise KeyServiceError(f"no key found for address {address}")
        if resp.status_code != 200:
            key_lookups_total.labels(outcome="error").inc()
            raise KeyServiceError(f"could not fetch public key for {address}: {resp.text}")
        try:
            data = resp.json()
            pub = PublicKey(curve_type=CurveType(data["curve_type"]), key=data["public_key"])
        except (ValueError, KeyError) as e:
            key_lookups_total.labels(outcome="error").inc()
            raise KeyServiceError(f"malformed public key response: {resp.text}") from e
        key_lookups_total.labels(outcome="found").inc()
        logger.debug(f"Fetched public key for {address}")
        return pub
