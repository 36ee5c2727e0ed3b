"""Map definition schemas (the persisted map file format)."""

from typing import Any, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from hexboard import config
from .grid import HexGridConfig


class AxialHex(BaseModel):
    """A hex cell in cube coordinates with an optional territory label."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    q: int
    r: int
    s: int
    territory_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("territoryId", "territory_id", "stateId"),
        serialization_alias="territoryId",
    )

    @model_validator(mode="before")
    @classmethod
    def derive_s(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("s") is None:
            q, r = data.get("q"), data.get("r")
            if isinstance(q, int) and isinstance(r, int):
                data = {**data, "s": -q - r}
        return data

    @model_validator(mode="after")
    def check_cube_invariant(self) -> "AxialHex":
        if self.q + self.r + self.s != 0:
            raise ValueError(
                f"Hex ({self.q},{self.r},{self.s}) breaks q + r + s = 0"
            )
        return self

    @property
    def id(self) -> str:
        return f"{self.q},{self.r}"


class Territory(BaseModel):
    """A named label over a set of hexes."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    display_color: str = Field(default=config.VOID_COLOR, alias="displayColor")
    hex_ids: tuple[str, ...] = Field(default=(), alias="hexIds")
    tags: tuple[str, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def default_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("name"):
            data = {**data, "name": data.get("id")}
        return data


class MapDefinition(BaseModel):
    """The complete, immutable description of a hex map."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str = ""
    version: str = "1"
    grid: HexGridConfig
    hexes: tuple[AxialHex, ...]
    territories: tuple[Territory, ...]
    adjacencies: dict[str, tuple[str, ...]] = Field(default_factory=dict)
    metadata: Optional[dict[str, Any]] = None

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @property
    def hex_count(self) -> int:
        return len(self.hexes)

    def territory_ids(self) -> list[str]:
        return [t.id for t in self.territories]
