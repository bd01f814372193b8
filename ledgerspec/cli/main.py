# MIT License
# Copyright (c) 2025 Hashborn

import argparse
import sys
import json
import logging
import os
from typing import List
from ..keys.client import KeyClient
from ..keys.keystore import KeyStore, KEYSTORE_DIR
from ..keys.remote import RemoteKeyClient
from ..genesis.spec.genesis_spec import GenesisSpec, merge_genesis_specs
from ..genesis.spec.presets import PRESETS, preset_spec
from ..protocol.config.params import NETWORKS, network_params
from ..protocol.types.common import CurveType, ProtocolError

logger = logging.getLogger(__name__)

def get_keys_dir(args):
    return args.keys_dir or os.environ.get("LEDGERSPEC_KEYS_DIR", KEYSTORE_DIR)

def get_key_client(args) -> KeyClient:
    url = args.keys_url or os.environ.get("LEDGERSPEC_KEYS_URL")
    if url:
        return RemoteKeyClient(url)
    return KeyStore(get_keys_dir(args))

def fail(message: str):
    print(f"Error: {message}")
    sys.exit(1)

# --- Keys Commands ---
def cmd_keys_add(args):
    ks = KeyStore(get_keys_dir(args))
    try:
        key = ks.create_key(args.name, CurveType(args.curve))
    except ProtocolError as e:
        fail(e)
    print(f"Key '{args.name}' created.")
    print(f"Address: {key['address']}")
    print(f"Pubkey:  {key['public_key']}")
    print("Important: Private key saved unencrypted. Do not share!")

def cmd_keys_import(args):
    ks = KeyStore(get_keys_dir(args))
    try:
        key = ks.import_key(args.name, args.private_key, CurveType(args.curve))
    except ProtocolError as e:
        fail(e)
    print(f"Key '{args.name}' imported.")
    print(f"Address: {key['address']}")

def cmd_keys_list(args):
    ks = KeyStore(get_keys_dir(args))
    keys = ks.list_keys()
    if not keys:
        print("No keys found.")
        return

    print(f"{'Name':<20} {'Curve':<10} {'Address':<45}")
    print("-" * 78)
    for k in keys:
        print(f"{k['name'] or '-':<20} {k['curve_type']:<10} {k['address']:<45}")

def cmd_keys_show(args):
    ks = KeyStore(get_keys_dir(args))
    key = ks.get_key(args.name)
    if not key:
        fail(f"Key '{args.name}' not found.")
    print(json.dumps({k: v for k, v in key.items() if k != 'private_key'}, indent=2))

# --- Spec Commands ---
def load_specs(paths: List[str]) -> List[GenesisSpec]:
    specs = []
    for path in paths:
        try:
            with open(path, "r") as f:
                specs.append(GenesisSpec.model_validate_json(f.read()))
        except OSError as e:
            fail(f"could not read {path}: {e}")
        except ValueError as e:
            fail(f"invalid genesis spec {path}: {e}")
    return specs

def print_spec(spec: GenesisSpec):
    print(spec.model_dump_json(indent=2, exclude_none=True))

def cmd_spec_preset(args):
    try:
        specs = [preset_spec(args.kind, name) for name in args.names]
    except ValueError as e:
        fail(e)
    print_spec(merge_genesis_specs(*specs))

def cmd_spec_merge(args):
    print_spec(merge_genesis_specs(*load_specs(args.files)))

def cmd_spec_resolve(args):
    spec = merge_genesis_specs(*load_specs(args.files))
    try:
        params = network_params(args.network)
    except ValueError as e:
        fail(e)
    if args.generate_node_keys is not None:
        params = params.with_overrides(generate_node_keys=args.generate_node_keys)

    try:
        doc = spec.genesis_doc(get_key_client(args), params)
    except ProtocolError as e:
        logger.error(f"Genesis resolution aborted: {e}")
        fail(e)
    print(doc.model_dump_json(indent=2))

def main():
    parser = argparse.ArgumentParser(description="Genesis participant resolver")
    parser.add_argument("--keys-dir", help=f"Local key store directory (default: {KEYSTORE_DIR})")
    parser.add_argument("--keys-url", help="Remote key service URL (overrides --keys-dir)")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")

    subparsers = parser.add_subparsers(dest="command")

    # Keys
    p_keys = subparsers.add_parser("keys", help="Manage local keys")
    sp_keys = p_keys.add_subparsers(dest="subcommand")

    pk_add = sp_keys.add_parser("add", help="Create a new key")
    pk_add.add_argument("name", help="Key name")
    pk_add.add_argument("--curve", choices=[c.value for c in CurveType], default=CurveType.ED25519.value)

    pk_import = sp_keys.add_parser("import", help="Import a private key")
    pk_import.add_argument("name", help="Key name")
    pk_import.add_argument("--private-key", required=True, help="Hex encoded private key")
    pk_import.add_argument("--curve", choices=[c.value for c in CurveType], default=CurveType.ED25519.value)

    sp_keys.add_parser("list", help="List keys")

    pk_show = sp_keys.add_parser("show", help="Show key details")
    pk_show.add_argument("name", help="Key name")

    # Spec
    p_spec = subparsers.add_parser("spec", help="Build and resolve genesis specs")
    sp_spec = p_spec.add_subparsers(dest="subcommand")

    ps_preset = sp_spec.add_parser("preset", help="Print a spec built from presets")
    ps_preset.add_argument("kind", choices=list(PRESETS), help="Preset kind")
    ps_preset.add_argument("names", nargs="+", help="Account names")

    ps_merge = sp_spec.add_parser("merge", help="Merge spec files")
    ps_merge.add_argument("files", nargs="+", help="Genesis spec JSON files")

    ps_resolve = sp_spec.add_parser("resolve", help="Resolve spec files into genesis records")
    ps_resolve.add_argument("files", nargs="+", help="Genesis spec JSON files")
    ps_resolve.add_argument("--network", choices=list(NETWORKS), default="devnet")
    ps_resolve.add_argument("--generate-node-keys", dest="generate_node_keys",
                            action=argparse.BooleanOptionalAction, default=None,
                            help="Generate node keys for validators without a node address")

    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.command == "keys":
        if args.subcommand == "add": cmd_keys_add(args)
        elif args.subcommand == "import": cmd_keys_import(args)
        elif args.subcommand == "list": cmd_keys_list(args)
        elif args.subcommand == "show": cmd_keys_show(args)
        else: p_keys.print_help()

    elif args.command == "spec":
        if args.subcommand == "preset": cmd_spec_preset(args)
        elif args.subcommand == "merge": cmd_spec_merge(args)
        elif args.subcommand == "resolve": cmd_spec_resolve(args)
        else: p_spec.print_help()

    else:
        parser.print_help()

if __name__ == "__main__":
    main()
