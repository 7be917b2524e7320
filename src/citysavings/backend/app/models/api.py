"""Pydantic models describing the public API surface."""

from __future__ import annotations

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from citysavings.backend.roles import Experience, Role, RoleKey

from .roster import ArbitrageMode, CityRecord

__all__ = [
    "ArbitrageRequest",
    "JurisdictionSummary",
    "NetSalaryRequest",
    "NetSalaryResponse",
    "RosterMeta",
    "RosterResponse",
    "TaxBreakdownItem",
    "format_validation_error",
]


class TaxBreakdownItem(BaseModel):
    """One monthly deduction line, rounded to whole euros."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    label: str
    amount: int


class NetSalaryRequest(BaseModel):
    """Gross salary and city submitted for a net salary estimate."""

    model_config = ConfigDict(extra="forbid")

    monthly_gross: float = Field(..., ge=0, allow_inf_nan=False)
    city: str = Field(..., min_length=1)

    @field_validator("city")
    @classmethod
    def _reject_blank_city(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("city cannot be blank")
        return value


class NetSalaryResponse(BaseModel):
    """Net salary together with the itemised deductions."""

    model_config = ConfigDict(extra="forbid")

    city: str
    jurisdiction: str
    jurisdiction_name: str
    monthly_gross: float
    net_monthly: int
    breakdown: list[TaxBreakdownItem]


class ArbitrageRequest(BaseModel):
    """Anchor selection state used to derive a composite roster.

    The role can be given either as a ready-made ``role_key`` string or as a
    ``role``/``experience`` pair. Without either the average key is used.
    When ``cities`` is omitted the configured base roster is transformed.
    """

    model_config = ConfigDict(extra="forbid")

    role_key: str | None = None
    role: Role | None = None
    experience: Experience | None = None
    nomad_mode: bool = False
    mode: ArbitrageMode = ArbitrageMode.WORK
    anchor: str | None = ""
    cities: list[CityRecord] | None = None

    @model_validator(mode="after")
    def _validate_role_selection(self) -> "ArbitrageRequest":
        if self.role_key is not None:
            if self.role is not None or self.experience is not None:
                raise ValueError("Provide either role_key or role/experience, not both")
            RoleKey.parse(self.role_key)
        elif (self.role is None) != (self.experience is None):
            raise ValueError("role and experience must be provided together")
        return self

    def resolved_role_key(self) -> RoleKey:
        if self.role_key is not None:
            return RoleKey.parse(self.role_key)
        if self.role is not None and self.experience is not None:
            return RoleKey(self.role, self.experience)
        return RoleKey.average()


class RosterMeta(BaseModel):
    """Metadata describing how a roster was derived."""

    model_config = ConfigDict(extra="forbid")

    nomad_mode: bool
    mode: ArbitrageMode
    anchor: str | None = None
    anchor_found: bool = False


class RosterResponse(BaseModel):
    """Roster payload returned to map and panel consumers."""

    model_config = ConfigDict(extra="forbid")

    role_key: str
    cities: list[CityRecord]
    meta: RosterMeta


class JurisdictionSummary(BaseModel):
    """Public description of one configured jurisdiction rule."""

    model_config = ConfigDict(extra="forbid")

    id: str
    name: str
    cities: list[str]
    default: bool
    currency: str
    exchange_rate: float
    components: list[str]


def format_validation_error(error: ValidationError) -> str:
    """Return a concise human-readable description of validation issues."""

    messages: list[str] = []
    for issue in error.errors():
        location = ".".join(str(part) for part in issue.get("loc", ()))
        message = issue.get("msg", "Invalid value")
        if "greater than or equal to 0" in message.lower():
            message = "value cannot be negative"
        if location:
            messages.append(f"{location}: {message}")
        else:
            messages.append(message)

    details = "; ".join(messages) if messages else str(error)
    return f"Invalid request payload: {details}"
