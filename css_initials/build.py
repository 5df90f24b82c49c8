from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from .catalog import load_catalog
from .normalize import build_initials
from .rules import GROUPS
from .writer import write_all

logger = logging.getLogger(__name__)


def build_groups(catalog: Mapping[str, Any]) -> Dict[str, Dict[str, str]]:
    results = {}
    for group, inherited in GROUPS.items():
        results[group] = build_initials(catalog, inherited=inherited)
        logger.info("%s: %d properties", group, len(results[group]))
    return results


def run(target: Optional[Path] = None, catalog: Optional[Mapping[str, Any]] = None) -> List[Path]:
    target = Path.cwd() if target is None else Path(target)
    if catalog is None:
        catalog = load_catalog()
    return asyncio.run(write_all(target, build_groups(catalog)))


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    run()
    print("☯ All done")


if __name__ == "__main__":
    main()
