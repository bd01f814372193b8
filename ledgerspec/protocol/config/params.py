# MIT License
# Copyright (c) 2025 Hashborn

import os
from typing import Dict
from ..types.common import CurveType

# Global Constants
DEFAULT_AMOUNT = 1_000_000
DEFAULT_POWER = 10_000
DEFAULT_PROPOSAL_THRESHOLD = 3
NODE_KEY_PREFIX = "nodekey-"

class GenesisParams:
    def __init__(self,
                 network_id: str,
                 chain_name_prefix: str,
                 default_curve: CurveType = CurveType.ED25519,
                 node_key_curve: CurveType = CurveType.ED25519,
                 default_amount: int = DEFAULT_AMOUNT,
                 default_power: int = DEFAULT_POWER,
                 default_proposal_threshold: int = DEFAULT_PROPOSAL_THRESHOLD,
                 # Synthetic names for unnamed templates
                 account_name_format: str = "Account_{index}",
                 validator_name_format: str = "Validator_{index}",
                 # Validator node keys
                 generate_node_keys: bool = False,
                 node_key_prefix: str = NODE_KEY_PREFIX):
        self.network_id = network_id
        self.chain_name_prefix = chain_name_prefix
        self.default_curve = default_curve
        self.node_key_curve = node_key_curve
        self.default_amount = default_amount
        self.default_power = default_power
        self.default_proposal_threshold = default_proposal_threshold
        self.account_name_format = account_name_format
        self.validator_name_format = validator_name_format
        self.generate_node_keys = generate_node_keys
        self.node_key_prefix = node_key_prefix

    def account_name(self, index: int) -> str:
        return self.account_name_format.format(index=index)

    def validator_name(self, index: int) -> str:
        return self.validator_name_format.format(index=index)

    def node_key_name(self, name: str) -> str:
        return self.node_key_prefix + name

    def with_overrides(self, **overrides) -> "GenesisParams":
        """Returns a copy with the given fields replaced."""
        values = dict(vars(self))
        unknown = set(overrides) - set(values)
        if unknown:
            raise ValueError(f"Unknown genesis params: {', '.join(sorted(unknown))}")
        values.update(overrides)
        return GenesisParams(**values)

NETWORKS: Dict[str, GenesisParams] = {
    "devnet": GenesisParams(
        network_id="devnet",
        chain_name_prefix="LedgerDevnet",
        generate_node_keys=True,
    ),
    "testnet": GenesisParams(
        network_id="testnet",
        chain_name_prefix="LedgerTestnet",
        default_amount=100_000_000,
        default_power=1_000_000,
    ),
    "mainnet": GenesisParams(
        network_id="mainnet",
        chain_name_prefix="LedgerChain",
        default_amount=0,
        default_power=100_000_000,
        default_proposal_threshold=5,
    ),
}

def network_params(name: str) -> GenesisParams:
    try:
        return NETWORKS[name]
    except KeyError:
        raise ValueError(f"Unknown network '{name}' (expected one of: {', '.join(NETWORKS)})")

# Default to devnet unless LEDGERSPEC_NETWORK says otherwise
CURRENT_NETWORK = network_params(os.environ.get("LEDGERSPEC_NETWORK", "devnet"))
