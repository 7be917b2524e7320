"""City records shared by the roster builder and the arbitrage model."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from citysavings.backend.roles import RoleKey, role_key_string


class ArbitrageMode(str, Enum):
    """Which side of the anchor city a composite profile borrows."""

    WORK = "work"
    HOME = "home"


class CityRecord(BaseModel):
    """Monthly salary and cost figures for one city.

    Salary and savings maps are keyed by role key strings. Missing keys read
    as zero. Amounts stay integers when they are whole euros. Records are
    frozen, and the arbitrage model deep-copies them so derived rosters never
    share maps with their input.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    name: str
    lat: float = 0.0
    lng: float = 0.0
    salary_gross: dict[str, int | float] = Field(default_factory=dict, alias="salaryGross")
    salary_net: dict[str, int | float] = Field(default_factory=dict, alias="salaryNet")
    savings: dict[str, int | float] = Field(default_factory=dict)
    rent: int | float
    living: int | float
    sunshine: float = 0.0
    is_arbitrage_base: bool = Field(default=False, alias="isArbitrageBase")

    @staticmethod
    def _lookup(values: Mapping[str, int | float], role_key: str | RoleKey) -> int | float:
        return values.get(role_key_string(role_key), 0)

    def net_for(self, role_key: str | RoleKey) -> int | float:
        return self._lookup(self.salary_net, role_key)

    def to_payload(self) -> dict[str, object]:
        """Serialise using the camelCase field names consumed by the UI."""

        return self.model_dump(mode="json", by_alias=True)


__all__ = ["ArbitrageMode", "CityRecord"]
