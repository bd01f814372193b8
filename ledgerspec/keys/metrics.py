# MIT License
# Copyright (c) 2025 Hashborn

"""
Prometheus counters for key service usage and participant resolution.
"""

from prometheus_client import Counter, CollectorRegistry

metrics_registry = CollectorRegistry()

keys_generated_total = Counter(
    'ledgerspec_keys_generated_total',
    'Keypairs generated through a key client',
    ['curve_type'],
    registry=metrics_registry
)

key_lookups_total = Counter(
    'ledgerspec_key_lookups_total',
    'Public key lookups by outcome',
    ['outcome'],  # found, unknown, error
    registry=metrics_registry
)

participants_resolved_total = Counter(
    'ledgerspec_participants_resolved_total',
    'Genesis participants resolved from templates',
    ['kind'],  # account, validator
    registry=metrics_registry
)
