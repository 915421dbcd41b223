from __future__ import annotations

"""JSON-like value types used where the manifest crosses the wire.

Static documents are passed through verbatim, so their value space is
declared as JSON rather than `Any`.
"""

from typing import TypeAlias


JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]
JSONObject: TypeAlias = dict[str, JSONValue]
JSONArray: TypeAlias = list[JSONValue]
