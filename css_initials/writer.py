"""
Filesystem output for derived groups.

Layout under the target directory, per group:
- <group>.css
- dist/<group>.cjs.js
- dist/<group>.esm.js
- <group>/package.json
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Awaitable, Dict, List, Mapping

from .render import (
    cjs_filename,
    esm_filename,
    render_manifest,
    selector_for,
    to_cjs_module,
    to_css_block,
    to_esm_module,
)
from .rules import DIST_DIR

logger = logging.getLogger(__name__)


def _write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


async def write_file(path: Path, content: str) -> Path:
    await asyncio.to_thread(_write_text, path, content)
    logger.debug("wrote %s", path)
    return path


def group_artifacts(target: Path, group: str, initials: Mapping[str, str]) -> Dict[Path, str]:
    return {
        target / f"{group}.css": to_css_block(initials, selector_for(group)),
        target / DIST_DIR / cjs_filename(group): to_cjs_module(initials),
        target / DIST_DIR / esm_filename(group): to_esm_module(initials),
        target / group / "package.json": render_manifest(group),
    }


def write_group(target: Path, group: str, initials: Mapping[str, str]) -> List[Awaitable[Path]]:
    return [write_file(path, content) for path, content in group_artifacts(target, group, initials).items()]


async def write_all(target: Path, results: Mapping[str, Mapping[str, str]]) -> List[Path]:
    """
    Write every artifact of every group concurrently.

    The first failing write propagates; files already written are left in place.
    """
    writes: List[Awaitable[Path]] = []
    for group, initials in results.items():
        writes.extend(write_group(target, group, initials))
    return list(await asyncio.gather(*writes))
