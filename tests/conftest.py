import hashlib
import pytest
from ledgerspec.keys.keystore import KeyStore
from ledgerspec.keys.mock import MockKeyClient
from ledgerspec.protocol.config.params import GenesisParams
from ledgerspec.protocol.crypto.keys import public_key_from_private
from ledgerspec.protocol.types.common import CurveType
from ledgerspec.protocol.types.identity import PublicKey


def make_public_key(seed: str, curve_type: CurveType = CurveType.ED25519) -> PublicKey:
    priv = hashlib.sha256(seed.encode("utf-8")).digest()
    return PublicKey.from_bytes(public_key_from_private(priv, curve_type), curve_type)


@pytest.fixture
def key_client():
    return MockKeyClient(seed="tests")


@pytest.fixture
def keystore(tmp_path):
    return KeyStore(str(tmp_path / "keys"))


@pytest.fixture
def params():
    return GenesisParams(network_id="test", chain_name_prefix="TestChain")


@pytest.fixture
def node_key_params(params):
    return params.with_overrides(generate_node_keys=True)
