"""
Renderers for a derived initial value mapping.

Every renderer is pure; writing the results is left to `writer`.
"""

from __future__ import annotations

import json
import re
from typing import Dict, Mapping

from .models import PackageManifest
from .rules import DIST_DIR, PACKAGE_SCOPE, SELECTOR_PREFIX

_DECLARATION = re.compile(r"^  ([^:]+): (.*);$")


def _to_json(data) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def selector_for(group: str) -> str:
    return f"{SELECTOR_PREFIX}{group}"


def to_css_block(initials: Mapping[str, str], selector: str) -> str:
    body = "\n".join(f"  {name}: {value};" for name, value in initials.items())
    return f"{selector} {{\n{body}\n}}"


def parse_css_block(css: str) -> Dict[str, str]:
    """Read the declarations of a block produced by `to_css_block` back into a mapping."""
    declarations: Dict[str, str] = {}
    for line in css.splitlines():
        match = _DECLARATION.match(line)
        if match:
            declarations[match.group(1)] = match.group(2)
    return declarations


def to_data_export(initials: Mapping[str, str]) -> Dict[str, str]:
    return dict(initials)


def to_cjs_module(initials: Mapping[str, str]) -> str:
    return f"module.exports = {_to_json(to_data_export(initials))};"


def to_esm_module(initials: Mapping[str, str]) -> str:
    return f"export default {_to_json(to_data_export(initials))};"


def cjs_filename(group: str) -> str:
    return f"{group}.cjs.js"


def esm_filename(group: str) -> str:
    return f"{group}.esm.js"


def to_manifest(group: str) -> PackageManifest:
    # Paths are relative to the <group>/ directory the manifest lives in.
    return PackageManifest(
        name=f"{PACKAGE_SCOPE}/{group}",
        main=f"../{DIST_DIR}/{cjs_filename(group)}",
        module=f"../{DIST_DIR}/{esm_filename(group)}",
    )


def render_manifest(group: str) -> str:
    return _to_json(to_manifest(group).model_dump())
