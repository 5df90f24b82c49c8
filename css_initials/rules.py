"""
Deterministic derivation rules.

This file exists to make exclusions and corrections explicit and enforceable.
"""

from pathlib import Path

CATALOG_PATH = Path(__file__).parent / "data" / "css_properties.json"

# `all` resets `unicode-bidi` and `direction` itself, so none of them belong in a reset.
EXCLUDE_LIST = (
    "all",
    "unicode-bidi",
    "direction",
)

REJECTED_STATUSES = ("experimental", "nonstandard")

# Initial values here depend on the user agent.
USER_AGENT_DEPENDENT_PROPS = (
    "color",
    "outline-color",
    "quotes",
    "text-align",
    "box-orient",
    "font-family",
)

USER_AGENT_VALUE = "initial"

APPEARANCE_FIX = {
    "-webkit-appearance": "none",
    "-moz-appearance": "none",
    "-ms-appearance": "none",
    "appearance": "none",
}

# group name -> inheritance filter (None means no filtering)
GROUPS = {
    "all": None,
    "inherited": True,
}

SELECTOR_PREFIX = ".initials-"
PACKAGE_SCOPE = "css-initials"
DIST_DIR = "dist"
