#!/usr/bin/env python3
"""
counter-py-address

Convert between 32-byte payloads and bech32 addresses.

Examples:
  python -m counter_py.cli.address encode --prefix juno --hex f810d017...572e
  python -m counter_py.cli.address encode --bytes '[248, 16, 208, ...]'
  python -m counter_py.cli.address decode juno1lqgdq9u8zhcvwwwz3xjswactrtq6qzptmlzlh6xspl34dxq32uhqhlphat

Exit codes:
  0 on success, 1 on an encoding/decoding error, 2 on bad usage.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict

from counter_py.cli import setup_logging
from counter_py.codec.address import Address, decode_address, encode_address
from counter_py.config import load_config
from counter_py.errors import ContractError

log = logging.getLogger(__name__)


def _byte_list(value: str) -> list:
    try:
        values = json.loads(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"must be a JSON array of 32 ints: {e}")
    if not isinstance(values, list):
        raise argparse.ArgumentTypeError("must be a JSON array of 32 ints")
    return values


def _payload_from_args(args: argparse.Namespace) -> Address:
    if args.hex is not None:
        return Address.from_hex(args.hex)
    return Address.from_ints(args.bytes)


def cmd_encode(args: argparse.Namespace) -> Dict[str, Any]:
    payload = _payload_from_args(args)
    prefix = args.prefix or load_config().default_hrp
    return {"address": encode_address(prefix, payload)}


def cmd_decode(args: argparse.Namespace) -> Dict[str, Any]:
    prefix, addr = decode_address(args.address)
    return {"prefix": prefix, "bytes": addr.to_ints(), "hex": addr.hex()}


def parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="counter-py-address", description="Bech32 <-> 32-byte address conversion.")
    p.add_argument("--log-level", help="Logging level (default: COUNTER_PY_LOG_LEVEL or WARNING)")
    sub = p.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encode", help="Encode a 32-byte payload as a bech32 address")
    enc.add_argument("--prefix", "-p", help="Address prefix (default: COUNTER_PY_DEFAULT_HRP or 'juno')")
    src = enc.add_mutually_exclusive_group(required=True)
    src.add_argument("--hex", help="Payload as 64 hex characters (optional 0x prefix)")
    src.add_argument("--bytes", type=_byte_list, help="Payload as a JSON array of 32 ints")
    enc.set_defaults(func=cmd_encode)

    dec = sub.add_parser("decode", help="Decode a bech32 address into prefix and bytes")
    dec.add_argument("address")
    dec.set_defaults(func=cmd_decode)
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(args.log_level)
    try:
        out = args.func(args)
    except ContractError as e:
        log.debug("address command failed: %r", e)
        print(json.dumps({"ok": False, "error": e.to_dict()}), file=sys.stderr)
        return 1
    print(json.dumps(out, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
