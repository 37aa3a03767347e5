"""Payload types shared by the test modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class DatabaseSettings(BaseModel):
    host: str = "localhost"
    port: int = 5432


class AppSettings(BaseModel):
    """Nested payload with defaults on every field."""

    name: str = "opzioni"
    debug: bool = False
    retries: int = 3
    timeout_sec: float = 2.5
    tags: List[str] = Field(default_factory=list)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)


class OptionalSettings(BaseModel):
    name: str = "optional"
    proxy: Optional[str] = None


class RequiredSettings(BaseModel):
    """Payload without a default value."""

    token: str


class Counter(BaseModel):
    """Two fields that writers always keep equal."""

    left: int = 0
    right: int = 0


class Limits(BaseModel):
    """Infinite floats and nested or empty lists."""

    model_config = ConfigDict(ser_json_inf_nan="constants")

    ceiling: float = float("inf")
    floor: float = float("-inf")
    grid: List[List[int]] = Field(default_factory=list)
    spare: List[str] = Field(default_factory=list)


@dataclass
class Profile:
    user: str = "guest"
    age: int = 0


class Opaque:
    """A type pydantic cannot build a schema for."""

    def __init__(self, handle: object = None) -> None:
        self.handle = handle
