from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Optional
from .identity import PublicKey
from .permissions import AccountPermissions

class BasicAccount(BaseModel):
    model_config = ConfigDict(frozen=True)

    address: str
    public_key: PublicKey
    amount: int

class Account(BaseModel):
    """Funded genesis account."""
    model_config = ConfigDict(frozen=True)

    address: str
    public_key: PublicKey
    amount: int
    name: str
    permissions: AccountPermissions

class Validator(BaseModel):
    """Bonded genesis validator."""
    model_config = ConfigDict(frozen=True)

    address: str
    public_key: PublicKey
    amount: int                          # bonded stake
    name: str
    node_address: Optional[str] = None   # address used for node-to-node communication
    unbond_to: List[BasicAccount]        # receives the stake on unbonding

    @model_validator(mode="after")
    def _single_unbond_entry(self) -> "Validator":
        if len(self.unbond_to) != 1:
            raise ValueError("validator must have exactly one unbond_to entry")
        return self

class GenesisParamsDoc(BaseModel):
    model_config = ConfigDict(frozen=True)

    proposal_threshold: int

class GenesisDoc(BaseModel):
    model_config = ConfigDict(frozen=True)

    genesis_time: datetime
    chain_name: str
    params: GenesisParamsDoc
    global_permissions: AccountPermissions
    accounts: List[Account] = Field(default_factory=list)
    validators: List[Validator] = Field(default_factory=list)

    def get_account(self, name: str) -> Optional[Account]:
        for a in self.accounts:
            if a.name == name:
                return a
        return None

    def total_power(self) -> int:
        return sum(v.amount for v in self.validators)
