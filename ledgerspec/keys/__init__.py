# MIT License
# Copyright (c) 2025 Hashborn

"""
Key Service clients.

Every client generates named keypairs and looks up public keys by address;
private key material never leaves the service.
"""

from .client import KeyClient
from .keystore import KeyStore
from .mock import MockKeyClient
from .remote import RemoteKeyClient

__all__ = ['KeyClient', 'KeyStore', 'MockKeyClient', 'RemoteKeyClient']
