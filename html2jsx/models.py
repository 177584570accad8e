"""Pydantic models for batch conversion manifests."""

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

from .component import COMPONENT_NAME_PATTERN


class ConversionJob(BaseModel):
    """One HTML file to convert and where to write the result."""

    input: Path = Field(..., description="HTML file to read.")
    output: Path = Field(..., description="JSX file to write.")
    component: Optional[str] = Field(
        None,
        pattern=COMPONENT_NAME_PATTERN,
        description="Wrap the output in a component module with this name.",
    )

    model_config = ConfigDict(extra="forbid")


class ConversionManifest(BaseModel):
    """Top-level manifest listing conversion jobs."""

    jobs: List[ConversionJob] = Field(
        default_factory=list, description="Jobs run in order by `html2jsx batch`."
    )

    model_config = ConfigDict(extra="forbid")


def _resolve_path(value: Path, base_dir: Path) -> Path:
    expanded = value.expanduser()
    if expanded.is_absolute():
        return expanded
    return base_dir / expanded


def load_manifest(path: Path) -> ConversionManifest:
    """Load a manifest and resolve job paths relative to its directory."""
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    manifest = ConversionManifest.model_validate(data)
    base_dir = path.parent
    jobs = [
        job.model_copy(
            update={
                "input": _resolve_path(job.input, base_dir),
                "output": _resolve_path(job.output, base_dir),
            }
        )
        for job in manifest.jobs
    ]
    return manifest.model_copy(update={"jobs": jobs})


__all__ = ["ConversionJob", "ConversionManifest", "load_manifest"]
