from functools import lru_cache

from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse

from .catalog import load_catalog
from .models import DerivationReport, HealthResponse, PackageManifest
from .normalize import build_initials, summarize
from .render import selector_for, to_css_block, to_data_export, to_manifest
from .rules import GROUPS

app = FastAPI(
    title="css-initials",
    description="Initial values of standard CSS properties for reset stylesheets",
    version="0.1.0",
)


@lru_cache(maxsize=1)
def _catalog():
    return load_catalog()


def _inherited_for(group: str):
    if group not in GROUPS:
        raise HTTPException(status_code=404, detail=f"Unknown group: {group}")
    return GROUPS[group]


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.get("/initials/{group}")
def initials(group: str):
    inherited = _inherited_for(group)
    return to_data_export(build_initials(_catalog(), inherited=inherited))


@app.get("/initials/{group}/css", response_class=PlainTextResponse)
def initials_css(group: str):
    inherited = _inherited_for(group)
    css = to_css_block(build_initials(_catalog(), inherited=inherited), selector_for(group))
    return PlainTextResponse(css, media_type="text/css")


@app.get("/initials/{group}/manifest", response_model=PackageManifest)
def manifest(group: str):
    _inherited_for(group)
    return to_manifest(group)


@app.get("/initials/{group}/report", response_model=DerivationReport)
def report(group: str):
    inherited = _inherited_for(group)
    return summarize(_catalog(), inherited=inherited, group=group)
