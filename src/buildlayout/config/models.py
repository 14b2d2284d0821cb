"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, buildlayout.toml only overrides.
An empty or missing file reproduces the stock Android root build script.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from buildlayout.domain.repositories import MAVEN_CENTRAL_URL

GUARDIAN_PROJECT_URL = "https://raw.githubusercontent.com/guardianproject/gpmaven/master"
ZENDESK_URL = "https://zendesk.jfrog.io/zendesk/repo"


class RepositoryConfig(BaseModel):
    """One [[repositories]] entry."""

    model_config = {"frozen": True}

    name: str
    url: str


def default_repositories() -> list[RepositoryConfig]:
    return [
        RepositoryConfig(name="maven-central", url=MAVEN_CENTRAL_URL),
        # ProofMode library
        RepositoryConfig(name="guardianproject", url=GUARDIAN_PROJECT_URL),
        # Support SDK
        RepositoryConfig(name="zendesk", url=ZENDESK_URL),
    ]


class LayoutConfig(BaseModel):
    """[layout] section.

    ``build_dir`` is resolved against the workspace root unless absolute.
    The default places outputs beside the module tree, not inside it.
    """

    model_config = {"frozen": True}

    build_dir: str = "../build"


class OrderEdgeConfig(BaseModel):
    """One ``[[projects.order]]`` entry: *dependent* evaluates after *dependency*."""

    model_config = {"frozen": True}

    dependent: str
    dependency: str


class ProjectsConfig(BaseModel):
    """[projects] section."""

    model_config = {"frozen": True}

    names: list[str] = Field(default_factory=lambda: ["app"])
    evaluation_anchor: str = "app"
    order: list[OrderEdgeConfig] = Field(default_factory=list)
