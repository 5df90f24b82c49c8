"""
Property catalog snapshot.

The catalog is a static JSON document shaped like mdn-data's
`css/properties.json`: property name -> metadata record. A full mdn-data style
document (`{"css": {"properties": {...}}}`) is accepted too.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from charset_normalizer import from_bytes

from .rules import CATALOG_PATH


class CatalogError(ValueError):
    pass


def decode_snapshot(raw: bytes) -> str:
    """
    Decode snapshot bytes to text.

    Rules:
    - A UTF-8 BOM is dropped.
    - Otherwise use charset-normalizer's best guess, falling back to UTF-8.
    - Undecodable input is an error; the snapshot is never approximated.
    """
    if raw.startswith(b"\xef\xbb\xbf"):
        return raw.decode("utf-8-sig")

    match = from_bytes(raw).best()
    encoding = match.encoding if match is not None else "utf-8"

    try:
        return raw.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise CatalogError(f"Catalog snapshot is not decodable as {encoding}") from exc


def catalog_properties(document: Any) -> Dict[str, Any]:
    if isinstance(document, dict) and isinstance(document.get("css"), dict):
        document = document["css"].get("properties")

    if not isinstance(document, dict):
        raise CatalogError("Catalog snapshot must be a mapping of property names to records")

    return document


def load_catalog(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    path = Path(path) if path is not None else CATALOG_PATH

    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise CatalogError(f"Cannot read catalog snapshot {path}") from exc

    try:
        document = json.loads(decode_snapshot(raw))
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Catalog snapshot {path} is not valid JSON") from exc

    return catalog_properties(document)
