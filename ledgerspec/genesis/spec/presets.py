from typing import Callable, Dict
from .genesis_spec import GenesisSpec
from .template_account import TemplateAccount
from ...protocol.config.params import DEFAULT_AMOUNT, DEFAULT_POWER
from ...protocol.types.permissions import ALL_STRING

# Single-account specs for common roles; combine with merge_genesis_specs.

def full_account(name: str) -> GenesisSpec:
    return _single(TemplateAccount(
        name=name,
        amount=DEFAULT_AMOUNT,
        power=DEFAULT_POWER,
        permissions=[ALL_STRING],
    ))

def root_account(name: str) -> GenesisSpec:
    return _single(TemplateAccount(
        name=name,
        amount=DEFAULT_AMOUNT,
        permissions=[ALL_STRING],
    ))

def participant_account(name: str) -> GenesisSpec:
    return _single(TemplateAccount(
        name=name,
        amount=DEFAULT_AMOUNT,
        permissions=["send", "call", "name", "hasRole"],
    ))

def developer_account(name: str) -> GenesisSpec:
    return _single(TemplateAccount(
        name=name,
        amount=DEFAULT_AMOUNT,
        permissions=["send", "call", "createContract", "createAccount", "name", "hasRole", "removeRole"],
    ))

def validator_account(name: str) -> GenesisSpec:
    return _single(TemplateAccount(
        name=name,
        amount=DEFAULT_AMOUNT,
        power=DEFAULT_POWER,
        permissions=["bond"],
    ))

PRESETS: Dict[str, Callable[[str], GenesisSpec]] = {
    "full": full_account,
    "root": root_account,
    "participant": participant_account,
    "developer": developer_account,
    "validator": validator_account,
}

def preset_spec(kind: str, name: str) -> GenesisSpec:
    try:
        preset = PRESETS[kind]
    except KeyError:
        raise ValueError(f"Unknown preset '{kind}' (expected one of: {', '.join(PRESETS)})")
    return preset(name)

def _single(template: TemplateAccount) -> GenesisSpec:
    return GenesisSpec(accounts=[template])
