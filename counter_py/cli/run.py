#!/usr/bin/env python3
"""
counter-py-run

Drive the counter contract against a JSON state file, one call per run.

Examples:
  python -m counter_py.cli.run --state /tmp/counter.json instantiate --sender alice --count 17
  python -m counter_py.cli.run --state /tmp/counter.json execute --sender bob '{"increment": {}}'
  python -m counter_py.cli.run --state /tmp/counter.json execute --sender alice '{"reset": {"count": 5}}'
  python -m counter_py.cli.run --state /tmp/counter.json query '{"get_count": {}}'
  python -m counter_py.cli.run schema --out ./schema

The state file defaults to COUNTER_PY_STATE_FILE. It is rewritten only after
a call succeeds.

Exit codes:
  0 on success, 1 on a contract error, 2 on bad usage.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from counter_py.cli import setup_logging
from counter_py.config import load_config
from counter_py.contract import contract
from counter_py.contract.msg import parse_instantiate_msg
from counter_py.contract.schema import export_schemas
from counter_py.errors import ContractError
from counter_py.runtime.context import BlockInfo, Deps, Env, MessageInfo
from counter_py.runtime.storage_api import JsonFileBackend

log = logging.getLogger(__name__)

# ---------------------- small utils ---------------------- #


def _non_empty(value: str) -> str:
    if not value:
        raise argparse.ArgumentTypeError("must be a non-empty string")
    return value


def _non_negative_int(value: str) -> int:
    try:
        n = int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {n}")
    return n


def _state_path(args: argparse.Namespace) -> Optional[Path]:
    return Path(args.state) if args.state else load_config().state_file


def _env(args: argparse.Namespace) -> Env:
    return Env(block=BlockInfo(height=args.height, time_ns=0, chain_id=args.chain_id))


def _open(args: argparse.Namespace) -> tuple[JsonFileBackend, Deps]:
    backend = JsonFileBackend(args.state_path)
    return backend, Deps(storage=backend)


# ---------------------- commands ---------------------- #


def cmd_instantiate(args: argparse.Namespace) -> Dict[str, Any]:
    backend, deps = _open(args)
    msg = parse_instantiate_msg({"count": args.count})
    res = contract.instantiate(deps, _env(args), MessageInfo(sender=args.sender), msg)
    backend.flush()
    return {"ok": True, "response": res.to_dict()}


def cmd_execute(args: argparse.Namespace) -> Dict[str, Any]:
    backend, deps = _open(args)
    res = contract.execute(deps, _env(args), MessageInfo(sender=args.sender), args.msg)
    backend.flush()
    return {"ok": True, "response": res.to_dict()}


def cmd_query(args: argparse.Namespace) -> Dict[str, Any]:
    _, deps = _open(args)
    raw = contract.query(deps, _env(args), args.msg)
    return {"ok": True, "result": json.loads(raw)}


def cmd_schema(args: argparse.Namespace) -> Dict[str, Any]:
    paths = export_schemas(args.out)
    return {"ok": True, "written": [str(p) for p in paths]}


# ---------------------- CLI ---------------------- #


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="counter-py-run", description="Run a single counter contract call.")
    p.add_argument("--state", "-s", help="Path to the JSON state file (default: COUNTER_PY_STATE_FILE)")
    p.add_argument("--height", type=_non_negative_int, default=1, help="Block height to report in Env")
    p.add_argument("--chain-id", type=_non_empty, default="local-1", help="Chain id to report in Env")
    p.add_argument("--log-level", help="Logging level (default: COUNTER_PY_LOG_LEVEL or WARNING)")
    sub = p.add_subparsers(dest="command", required=True)

    ins = sub.add_parser("instantiate", help="Create the counter (once)")
    ins.add_argument("--sender", type=_non_empty, required=True)
    ins.add_argument("--count", type=int, required=True)
    ins.set_defaults(func=cmd_instantiate, needs_state=True)

    ex = sub.add_parser("execute", help="Run an ExecuteMsg, e.g. '{\"increment\": {}}'")
    ex.add_argument("--sender", type=_non_empty, required=True)
    ex.add_argument("msg", help="ExecuteMsg JSON")
    ex.set_defaults(func=cmd_execute, needs_state=True)

    q = sub.add_parser("query", help="Run a QueryMsg, e.g. '{\"get_count\": {}}'")
    q.add_argument("msg", help="QueryMsg JSON")
    q.set_defaults(func=cmd_query, needs_state=True)

    sc = sub.add_parser("schema", help="Write JSON Schemas for all messages")
    sc.add_argument("--out", "-o", default="schema", help="Output directory")
    sc.set_defaults(func=cmd_schema, needs_state=False)
    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    args.state_path = _state_path(args)
    if args.needs_state and args.state_path is None:
        parser.error("a state file is required: pass --state or set COUNTER_PY_STATE_FILE")
    setup_logging(args.log_level)
    try:
        out = args.func(args)
    except ContractError as e:
        log.debug("%s failed: %r", args.command, e)
        print(json.dumps({"ok": False, "error": e.to_dict()}, default=str), file=sys.stderr)
        return 1
    print(json.dumps(out, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
