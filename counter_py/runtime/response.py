"""
counter_py.runtime.response — result records returned by state-changing calls.

A ``Response`` is an ordered list of string attributes (key/value tags that
describe what the call did). Keys must be identifier-like; values are
always strings.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from counter_py.errors import SerializeError

MAX_KEY_LEN = 64
MAX_VALUE_LEN = 4096

# Keys must be identifier-like: letters/underscore, then letters/digits/underscore.
_KEY_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True)
class Attribute:
    key: str
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not _KEY_RE.match(self.key) or len(self.key) > MAX_KEY_LEN:
            raise SerializeError(
                "attribute key has invalid characters or length",
                context={"key": self.key},
            )
        if len(self.value) > MAX_VALUE_LEN:
            raise SerializeError(
                "attribute value too long",
                context={"key": self.key, "len": len(self.value)},
            )


@dataclass
class Response:
    """
    Builder-style result:

        Response().add_attribute("method", "reset").add_attribute("count", 5)
    """

    attributes: List[Attribute] = field(default_factory=list)

    def add_attribute(self, key: str, value: Any) -> "Response":
        self.attributes.append(Attribute(key, str(value)))
        return self

    def attribute(self, key: str) -> Optional[str]:
        """Return the first value recorded for `key`, or None."""
        for attr in self.attributes:
            if attr.key == key:
                return attr.value
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "attributes": [{"key": a.key, "value": a.value} for a in self.attributes],
        }


__all__ = ["Attribute", "Response", "MAX_KEY_LEN", "MAX_VALUE_LEN"]
