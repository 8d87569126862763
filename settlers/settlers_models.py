"""Strict pydantic models for game settings."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from settlers.constants import COLORS, MAX_PLAYERS, MIN_PLAYERS, VICTORY_POINTS_TO_WIN


class PlayerConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, max_length=32)
    color: str

    @field_validator("color")
    @classmethod
    def color_must_be_known(cls, value: str) -> str:
        value = value.lower()
        if value not in COLORS:
            raise ValueError(f"Invalid color '{value}'. Expected one of: {', '.join(COLORS)}")
        return value


class GameConfig(BaseModel):
    players: List[PlayerConfig] = Field(min_length=MIN_PLAYERS, max_length=MAX_PLAYERS)
    seed: Optional[int] = None
    victory_points: int = Field(default=VICTORY_POINTS_TO_WIN, ge=3, le=20)

    @model_validator(mode="after")
    def players_are_distinct(self) -> "GameConfig":
        colors = [p.color for p in self.players]
        if len(set(colors)) != len(colors):
            raise ValueError("Each player needs a different color")
        names = [p.name for p in self.players]
        if len(set(names)) != len(names):
            raise ValueError("Each player needs a different name")
        return self

    @classmethod
    def from_names(cls, names: List[str], seed: Optional[int] = None, **kwargs) -> "GameConfig":
        """Build a config handing out colors in table order."""
        players = [
            {"name": name, "color": COLORS[i % len(COLORS)]} for i, name in enumerate(names)
        ]
        return cls.model_validate({"players": players, "seed": seed, **kwargs})

