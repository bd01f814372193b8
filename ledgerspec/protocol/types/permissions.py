from enum import IntFlag
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Sequence
from .common import PermissionTranslationError

class PermFlag(IntFlag):
    ROOT = 1 << 0
    SEND = 1 << 1
    CALL = 1 << 2
    CREATE_CONTRACT = 1 << 3
    CREATE_ACCOUNT = 1 << 4
    BOND = 1 << 5
    NAME = 1 << 6
    PROPOSAL = 1 << 7
    INPUT = 1 << 8
    BATCH = 1 << 9
    IDENTIFY = 1 << 10

    # Moderator permissions
    HAS_BASE = 1 << 11
    SET_BASE = 1 << 12
    UNSET_BASE = 1 << 13
    SET_GLOBAL = 1 << 14
    HAS_ROLE = 1 << 15
    ADD_ROLE = 1 << 16
    REMOVE_ROLE = 1 << 17

NONE_PERM_FLAGS = PermFlag(0)
ALL_PERM_FLAGS = PermFlag((1 << 18) - 1)

DEFAULT_PERM_FLAGS = (
    PermFlag.SEND | PermFlag.CALL | PermFlag.CREATE_CONTRACT | PermFlag.CREATE_ACCOUNT
    | PermFlag.BOND | PermFlag.NAME | PermFlag.PROPOSAL | PermFlag.INPUT | PermFlag.BATCH
    | PermFlag.IDENTIFY | PermFlag.HAS_BASE | PermFlag.HAS_ROLE
)

ALL_STRING = "all"

PERM_NAMES: Dict[str, PermFlag] = {
    "root": PermFlag.ROOT,
    "send": PermFlag.SEND,
    "call": PermFlag.CALL,
    "createContract": PermFlag.CREATE_CONTRACT,
    "createAccount": PermFlag.CREATE_ACCOUNT,
    "bond": PermFlag.BOND,
    "name": PermFlag.NAME,
    "proposal": PermFlag.PROPOSAL,
    "input": PermFlag.INPUT,
    "batch": PermFlag.BATCH,
    "identify": PermFlag.IDENTIFY,
    "hasBase": PermFlag.HAS_BASE,
    "setBase": PermFlag.SET_BASE,
    "unsetBase": PermFlag.UNSET_BASE,
    "setGlobal": PermFlag.SET_GLOBAL,
    "hasRole": PermFlag.HAS_ROLE,
    "addRole": PermFlag.ADD_ROLE,
    "removeRole": PermFlag.REMOVE_ROLE,
}

class BasePermissions(BaseModel):
    """Permission flags plus the mask of flags that are explicitly set.

    A flag outside ``set_bit`` is unset and falls through to global permissions.
    """
    model_config = ConfigDict(frozen=True)

    perms: int = 0
    set_bit: int = 0

    def get(self, flag: PermFlag) -> bool:
        return bool(self.perms & flag)

    def is_set(self, flag: PermFlag) -> bool:
        return bool(self.set_bit & flag)

class AccountPermissions(BaseModel):
    model_config = ConfigDict(frozen=True)

    base: BasePermissions = Field(default_factory=BasePermissions)
    roles: List[str] = Field(default_factory=list)

    def has_role(self, role: str) -> bool:
        return role in self.roles

    def clone(self) -> "AccountPermissions":
        return self.model_copy(deep=True)

ZERO_ACCOUNT_PERMISSIONS = AccountPermissions()
DEFAULT_ACCOUNT_PERMISSIONS = AccountPermissions(
    base=BasePermissions(perms=int(DEFAULT_PERM_FLAGS), set_bit=int(ALL_PERM_FLAGS)),
)

def perm_string_to_flag(name: str) -> PermFlag:
    if name == ALL_STRING:
        return ALL_PERM_FLAGS
    try:
        return PERM_NAMES[name]
    except KeyError:
        raise PermissionTranslationError(name)

def base_permissions_from_string_list(names: Sequence[str]) -> BasePermissions:
    """Translates permission names into a BasePermissions with every named flag set.

    Raises PermissionTranslationError on the first unrecognised name.
    """
    perms = NONE_PERM_FLAGS
    for name in names:
        perms |= perm_string_to_flag(name)
    return BasePermissions(perms=int(perms), set_bit=int(perms))

def permission_names(flags: int) -> List[str]:
    """Names of the flags set in a mask, in flag order."""
    return [name for name, flag in PERM_NAMES.items() if flags & flag]
