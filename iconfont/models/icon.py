"""Icon source and shape models."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IconModuleSource(BaseModel):
    """One generated icon module, read from disk."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    text: str


class PathShape(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["path"] = "path"
    d: str
    fill_rule: str | None = None
    clip_rule: str | None = None


class CircleShape(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["circle"] = "circle"
    cx: str
    cy: str
    r: str


Shape = Annotated[Union[PathShape, CircleShape], Field(discriminator="kind")]


class IconDocument(BaseModel):
    """A fully extracted icon: viewBox plus shapes in encounter order."""

    name: str
    view_box: str
    shapes: list[Shape]

    @field_validator("view_box")
    @classmethod
    def _view_box_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("viewBox must not be empty")
        return v

    @field_validator("shapes")
    @classmethod
    def _has_shapes(cls, v: list) -> list:
        if not v:
            raise ValueError("an icon needs at least one shape")
        return v

    @property
    def num_paths(self) -> int:
        return sum(1 for s in self.shapes if s.kind == "path")

    @property
    def num_circles(self) -> int:
        return sum(1 for s in self.shapes if s.kind == "circle")
