# MIT License
# Copyright (c) 2025 Hashborn

"""
Genesis specs: partial participant templates resolved into genesis records.
"""

from .template_account import TemplateAccount
from .genesis_spec import GenesisSpec, SpecParams, merge_genesis_specs
from .presets import preset_spec

__all__ = ['TemplateAccount', 'GenesisSpec', 'SpecParams', 'merge_genesis_specs', 'preset_spec']
