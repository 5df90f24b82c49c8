"""
Core derivation logic lives here.

Responsibilities:
- reject properties that do not belong in a reset stylesheet
- force user-agent dependent properties to `initial`
- strip markup from catalog values
- fold the survivors into a name -> initial value mapping
- apply the appearance corrections last
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from pydantic import ValidationError

from .models import DerivationReport, PropertyRecord
from .rules import (
    APPEARANCE_FIX,
    EXCLUDE_LIST,
    REJECTED_STATUSES,
    USER_AGENT_DEPENDENT_PROPS,
    USER_AGENT_VALUE,
)

logger = logging.getLogger(__name__)

_CODE_MARKUP = re.compile(r"</?code>")


def strip_code_markup(value: str) -> str:
    return _CODE_MARKUP.sub("", value)


def _as_record(record: Any) -> Optional[PropertyRecord]:
    if isinstance(record, PropertyRecord):
        return record
    try:
        return PropertyRecord.model_validate(record)
    except ValidationError:
        return None


def skip_reason(name: str, record: Any, inherited: Optional[bool] = None) -> Optional[str]:
    """
    Return why a catalog entry is left out, or None when it is kept.

    Checks run in a fixed order and the first failing one wins:
    excluded, malformed (not a record at all), status, compound_initial,
    inherited_mismatch. Missing fields are not an error by themselves.
    """
    if name in EXCLUDE_LIST:
        return "excluded"

    parsed = _as_record(record)
    if parsed is None:
        return "malformed"
    if parsed.status in REJECTED_STATUSES:
        return "status"
    if not isinstance(parsed.initial, str):
        return "compound_initial"
    if inherited is not None and parsed.inherited != inherited:
        return "inherited_mismatch"
    return None


def filtered_entries(
    catalog: Mapping[str, Any], inherited: Optional[bool] = None
) -> Iterator[Tuple[str, str]]:
    """
    Yield (name, initial value) pairs for the properties that pass every filter,
    in catalog order.
    """
    for name, record in catalog.items():
        reason = skip_reason(name, record, inherited)
        if reason is not None:
            logger.debug("skipping %s: %s", name, reason)
            continue

        if name in USER_AGENT_DEPENDENT_PROPS:
            value = USER_AGENT_VALUE
        else:
            value = _as_record(record).initial

        yield name, strip_code_markup(value)


def derive_initials(catalog: Mapping[str, Any], inherited: Optional[bool] = None) -> Dict[str, str]:
    initials: Dict[str, str] = {}
    for name, value in filtered_entries(catalog, inherited):
        initials[name] = value
    return initials


def apply_corrections(initials: Mapping[str, str]) -> Dict[str, str]:
    # Overrides always win; existing keys keep their position.
    corrected = dict(initials)
    corrected.update(APPEARANCE_FIX)
    return corrected


def build_initials(catalog: Mapping[str, Any], inherited: Optional[bool] = None) -> Dict[str, str]:
    return apply_corrections(derive_initials(catalog, inherited))


def summarize(
    catalog: Mapping[str, Any], inherited: Optional[bool] = None, group: Optional[str] = None
) -> DerivationReport:
    reasons = Counter(skip_reason(name, record, inherited) for name, record in catalog.items())
    kept = reasons.pop(None, 0)
    return DerivationReport(
        group=group,
        inherited=inherited,
        kept=kept,
        skipped=dict(sorted(reasons.items())),
    )
