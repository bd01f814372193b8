import os
import stat
import pytest
from ledgerspec.keys.keystore import KeyStore
from ledgerspec.keys.metrics import metrics_registry
from ledgerspec.protocol.crypto.addresses import address_from_pubkey
from ledgerspec.protocol.crypto.keys import public_key_from_private
from ledgerspec.protocol.types.common import CurveType, KeyServiceError
from ledgerspec.genesis.spec.template_account import TemplateAccount
from ledgerspec.genesis.spec.presets import preset_spec


def generated_count(curve_type: CurveType) -> float:
    value = metrics_registry.get_sample_value(
        'ledgerspec_keys_generated_total', {'curve_type': curve_type.value}
    )
    return value or 0.0


def test_generate_and_lookup(keystore):
    address = keystore.generate("alice", CurveType.ED25519)
    pub = keystore.public_key(address)

    assert pub.curve_type == CurveType.ED25519
    assert pub.address() == address
    assert keystore.get_key("alice")["address"] == address


def test_secp256k1_keys(keystore):
    address = keystore.generate("bob", CurveType.SECP256K1)
    pub = keystore.public_key(address)
    assert pub.curve_type == CurveType.SECP256K1
    assert pub.address() == address


def test_key_file_permissions(keystore):
    address = keystore.generate("carol", CurveType.ED25519)
    mode = os.stat(os.path.join(keystore.root_dir, f"{address}.json")).st_mode
    assert stat.S_IMODE(mode) == 0o600


def test_unknown_address(keystore):
    other = KeyStore(os.path.join(keystore.root_dir, "other"))
    address = other.generate("elsewhere", CurveType.ED25519)
    with pytest.raises(KeyServiceError):
        keystore.public_key(address)


def test_duplicate_names(keystore):
    keystore.generate("dave", CurveType.ED25519)
    with pytest.raises(KeyServiceError):
        keystore.generate("dave", CurveType.ED25519)

    # Unnamed keys never collide
    a = keystore.generate("", CurveType.ED25519)
    b = keystore.generate("", CurveType.ED25519)
    assert a != b


def test_import_key(keystore):
    priv = bytes(range(32))
    key = keystore.import_key("erin", priv.hex(), CurveType.SECP256K1)

    expected = address_from_pubkey(public_key_from_private(priv, CurveType.SECP256K1), CurveType.SECP256K1)
    assert key["address"] == expected
    assert keystore.public_key(expected).key == key["public_key"]

    with pytest.raises(KeyServiceError):
        keystore.import_key("frank", "not-hex")
    with pytest.raises(KeyServiceError):
        keystore.import_key("frank", "abcd")


def test_list_and_delete(keystore):
    keystore.generate("gina", CurveType.ED25519)
    keystore.generate("hank", CurveType.ED25519)

    keys = keystore.list_keys()
    assert sorted(k["name"] for k in keys) == ["gina", "hank"]
    assert all("private_key" not in k for k in keys)

    assert keystore.delete_key("gina") is True
    assert keystore.delete_key("gina") is False
    assert keystore.get_key("gina") is None


def test_generation_metrics(keystore):
    before = generated_count(CurveType.ED25519)
    keystore.generate("ivy", CurveType.ED25519)
    assert generated_count(CurveType.ED25519) == before + 1


def test_account_from_keystore(keystore, params):
    account = TemplateAccount(name="judy").account(keystore, 0, params)
    assert keystore.get_key("judy")["address"] == account.address
    assert account.public_key.address() == account.address


def test_resolving_named_template_twice_needs_fresh_keystore(keystore, params):
    spec = preset_spec("validator", "val0")
    doc = spec.genesis_doc(keystore, params)
    assert doc.validators[0].address == keystore.get_key("val0")["address"]

    # Named keys are created once; re-resolving must pin the address instead
    with pytest.raises(KeyServiceError):
        spec.genesis_doc(keystore, params)

    pinned = spec.model_copy(update={"accounts": [
        spec.accounts[0].model_copy(update={"address": doc.accounts[0].address})
    ]})
    again = pinned.genesis_doc(keystore, params)
    assert again.accounts[0].address == doc.accounts[0].address
