from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from .common import CurveType, ValidationError
from ..crypto.keys import check_public_key
from ..crypto.addresses import address_from_pubkey, DEFAULT_PREFIX

class PublicKey(BaseModel):
    model_config = ConfigDict(frozen=True)

    curve_type: CurveType
    key: str          # hex encoded public key

    @field_validator("key")
    @classmethod
    def _normalise_hex(cls, v: str) -> str:
        try:
            bytes.fromhex(v)
        except ValueError:
            raise ValueError("public key must be hex encoded")
        return v.lower()

    @model_validator(mode="after")
    def _check_length(self) -> "PublicKey":
        try:
            check_public_key(self.key_bytes, self.curve_type)
        except ValidationError as e:
            raise ValueError(str(e))
        return self

    @classmethod
    def from_bytes(cls, pub_bytes: bytes, curve_type: CurveType) -> "PublicKey":
        return cls(curve_type=curve_type, key=pub_bytes.hex())

    @property
    def key_bytes(self) -> bytes:
        return bytes.fromhex(self.key)

    def address(self, prefix: str = DEFAULT_PREFIX) -> str:
        """Address derived from this key. Always the identity of the key."""
        return address_from_pubkey(self.key_bytes, self.curve_type, prefix)

    def __str__(self) -> str:
        return f"{self.curve_type.value}:{self.key}"

class ResolvedIdentity(BaseModel):
    """A public key and the address derived from it."""
    model_config = ConfigDict(frozen=True)

    public_key: PublicKey
    address: str
