from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from buildpath.errors import BuildPathError
from buildpath.util.paths import DEFAULT_BASE_DIR, DEFAULT_PROFILE


class DepSpec(BaseModel):
    """One dependency declaration: ``"name"``, ``[name, spec]`` or ``{"name": ..., ...}``."""

    model_config = ConfigDict(extra="allow")

    name: str
    spec: Any = None

    @model_validator(mode="before")
    @classmethod
    def coerce_shorthand(cls, v: Any) -> Any:
        if isinstance(v, str):
            return {"name": v}
        if isinstance(v, (list, tuple)):
            if len(v) == 1:
                return {"name": v[0]}
            if len(v) == 2:
                return {"name": v[0], "spec": v[1]}
            raise ValueError("dependency pair must be [name] or [name, spec]")
        return v

    def as_pair(self) -> Tuple[str, Any]:
        if self.spec is not None:
            return self.name, self.spec
        # extra keys of the object form make up the spec
        return self.name, dict(self.model_extra or {})


class ProfileConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    deps: List[DepSpec] = Field(default_factory=list)


class ProjectConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    base_dir: str = DEFAULT_BASE_DIR
    deps: List[DepSpec] = Field(default_factory=list)
    profiles: Dict[str, ProfileConfig] = Field(default_factory=dict)
    apps: Optional[List[str]] = None
    project_app_dirs: List[str] = Field(default_factory=lambda: ["apps/*", "lib/*", "."])

    def deps_for(self, profile: str) -> List[DepSpec]:
        # top-level deps belong to the default profile
        declared = list(self.deps) if profile == DEFAULT_PROFILE else []
        prof = self.profiles.get(profile)
        if prof is not None:
            declared.extend(prof.deps)
        return declared


def load_project_config(path: Path) -> ProjectConfig:
    """Read and validate ``path``; a missing or blank file yields the defaults."""
    if not path.exists():
        return ProjectConfig()
    try:
        content = path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        raise BuildPathError(f"cannot read {path}: {e}") from e
    if not content:
        return ProjectConfig()
    try:
        return ProjectConfig.model_validate_json(content)
    except ValidationError as e:
        raise BuildPathError(f"invalid project config {path}: {e}") from e
