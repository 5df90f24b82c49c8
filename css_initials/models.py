from __future__ import annotations

from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


class PropertyRecord(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    status: Optional[str] = None
    initial: Any = None
    inherited: Optional[bool] = None


class PackageManifest(BaseModel):
    name: str
    main: str
    module: str


class DerivationReport(BaseModel):
    group: Optional[str] = Field(default=None, examples=["all"])
    inherited: Optional[bool] = None
    kept: int = 0
    skipped: Dict[str, int] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    ok: bool = True
