import json

from css_initials.normalize import build_initials
from css_initials.render import (
    parse_css_block,
    render_manifest,
    selector_for,
    to_cjs_module,
    to_css_block,
    to_data_export,
    to_esm_module,
    to_manifest,
)

INITIALS = {"display": "inline", "color": "initial", "background-position": "0% 0%"}


def test_css_block_layout():
    css = to_css_block(INITIALS, ".initials-all")
    assert css == (
        ".initials-all {\n"
        "  display: inline;\n"
        "  color: initial;\n"
        "  background-position: 0% 0%;\n"
        "}"
    )


def test_css_block_round_trip():
    catalog = {
        "opacity": {"status": "standard", "initial": "<code>1.0</code>", "inherited": False},
        "quotes": {"status": "standard", "initial": "dependsOnUserAgent", "inherited": True},
        "background-position": {"status": "standard", "initial": "0% 0%", "inherited": False},
    }
    initials = build_initials(catalog)
    assert parse_css_block(to_css_block(initials, selector_for("all"))) == initials


def test_selector_for():
    assert selector_for("inherited") == ".initials-inherited"


def test_data_export_is_a_copy():
    exported = to_data_export(INITIALS)
    assert exported == INITIALS
    assert exported is not INITIALS


def test_cjs_module():
    text = to_cjs_module(INITIALS)
    assert text.startswith("module.exports = {\n  \"display\": \"inline\",")
    assert text.endswith("\n};")
    assert json.loads(text[len("module.exports = "):-1]) == INITIALS


def test_esm_module():
    text = to_esm_module(INITIALS)
    assert text.startswith("export default {\n")
    assert text.endswith("};")
    assert json.loads(text[len("export default "):-1]) == INITIALS


def test_manifest():
    manifest = to_manifest("inherited")
    assert manifest.name == "css-initials/inherited"
    assert manifest.main == "../dist/inherited.cjs.js"
    assert manifest.module == "../dist/inherited.esm.js"

    assert render_manifest("inherited") == (
        "{\n"
        "  \"name\": \"css-initials/inherited\",\n"
        "  \"main\": \"../dist/inherited.cjs.js\",\n"
        "  \"module\": \"../dist/inherited.esm.js\"\n"
        "}"
    )


def test_css_block_round_trip_keeps_value_whitespace():
    initials = {"x": "a ", "y": " b", "grid-template-areas": "\"a b\""}
    assert parse_css_block(to_css_block(initials, ".initials-all")) == initials
