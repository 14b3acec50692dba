"""
JSON Schema export for the counter messages.

    counter-py-run schema --out schema/

writes one ``<snake_name>.json`` per message/response type.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import TypeAdapter

from .msg import (Bech32AddrResponse, BytesAddrResponse, CountResponse,
                  ExecuteMsg, InstantiateMsg, QueryMsg)

log = logging.getLogger(__name__)

_SCHEMA_TYPES: Dict[str, Any] = {
    "instantiate_msg": InstantiateMsg,
    "execute_msg": ExecuteMsg,
    "query_msg": QueryMsg,
    "count_response": CountResponse,
    "bech32_addr_response": Bech32AddrResponse,
    "bytes_addr_response": BytesAddrResponse,
}

_TITLES = {
    "instantiate_msg": "InstantiateMsg",
    "execute_msg": "ExecuteMsg",
    "query_msg": "QueryMsg",
    "count_response": "CountResponse",
    "bech32_addr_response": "Bech32AddrResponse",
    "bytes_addr_response": "BytesAddrResponse",
}


def schemas() -> Dict[str, Dict[str, Any]]:
    """Return {snake_name: JSON Schema dict} for every exported type."""
    out: Dict[str, Dict[str, Any]] = {}
    for name, tp in _SCHEMA_TYPES.items():
        schema = TypeAdapter(tp).json_schema()
        schema.setdefault("title", _TITLES[name])
        schema["$schema"] = "http://json-schema.org/draft-07/schema#"
        out[name] = schema
    return out


def export_schemas(out_dir: Union[str, Path]) -> list[Path]:
    """Write every schema to `out_dir` (created if missing); return the paths written."""
    target = Path(out_dir)
    target.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for name, schema in schemas().items():
        path = target / f"{name}.json"
        path.write_text(json.dumps(schema, indent=2, sort_keys=True) + "\n", encoding="utf-8")
        written.append(path)
    log.info("wrote %d schemas to %s", len(written), target)
    return written


__all__ = ["schemas", "export_schemas"]
