"""Pydantic models describing the jurisdiction and city seed schemas."""

from __future__ import annotations

from typing import Any, Literal, Mapping

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from citysavings.backend.roles import Experience, Role


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


def normalise_city_name(name: str) -> str:
    """Return the lookup form of a city name (trimmed, lower case)."""

    return name.strip().lower()


class TaxBracket(ImmutableModel):
    """Represents a single progressive tax bracket."""

    upper_bound: float | None = Field(default=None, alias="upper")
    rate: float

    @model_validator(mode="after")
    def _validate_values(self) -> TaxBracket:
        if self.rate < 0:
            raise ConfigurationError("Tax rates must be non-negative")
        if self.upper_bound is not None and self.upper_bound <= 0:
            raise ConfigurationError("Upper bounds must be positive values")
        return self


ComponentKind = Literal["progressive", "rate", "fixed", "informational"]


class DeductionComponent(ImmutableModel):
    """One labelled deduction applied by a jurisdiction rule.

    ``progressive`` components run ``brackets`` over the taxable base,
    ``rate`` components charge ``rate`` on the base above ``threshold``,
    ``fixed`` components deduct a constant annual ``amount`` and
    ``informational`` components only contribute a zero-amount line to the
    breakdown. The taxable base is ``base_share`` of the annual gross, in the
    rule's local currency.
    """

    id: str
    label: str
    kind: ComponentKind
    base_share: float = 1.0
    brackets: tuple[TaxBracket, ...] = ()
    rate: float | None = None
    threshold: float = 0.0
    amount: float | None = None

    @model_validator(mode="after")
    def _validate_kind(self) -> DeductionComponent:
        if not 0 < self.base_share <= 1:
            raise ConfigurationError(
                f"Component '{self.id}' base share must be within (0, 1]"
            )
        if self.kind == "progressive":
            if not self.brackets:
                raise ConfigurationError(
                    f"Progressive component '{self.id}' requires brackets"
                )
            if self.brackets[-1].upper_bound is not None:
                raise ConfigurationError(
                    f"Progressive component '{self.id}' must end with an open bracket"
                )
        elif self.kind == "rate":
            if self.rate is None:
                raise ConfigurationError(f"Rate component '{self.id}' requires a rate")
            if self.threshold < 0:
                raise ConfigurationError(
                    f"Rate component '{self.id}' threshold must be non-negative"
                )
        elif self.kind == "fixed":
            if self.amount is None or self.amount < 0:
                raise ConfigurationError(
                    f"Fixed component '{self.id}' requires a non-negative amount"
                )
        return self


class JurisdictionRule(ImmutableModel):
    """Proxy tax rule shared by one or more cities."""

    id: str
    name: str
    cities: tuple[str, ...] = ()
    default: bool = False
    currency: str = "EUR"
    exchange_rate: float = 1.0
    components: tuple[DeductionComponent, ...]

    @field_validator("cities", mode="before")
    @classmethod
    def _normalise_cities(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]
        return tuple(normalise_city_name(str(city)) for city in value)

    @model_validator(mode="after")
    def _validate_rule(self) -> JurisdictionRule:
        if self.exchange_rate <= 0:
            raise ConfigurationError(f"Rule '{self.id}' exchange rate must be positive")
        if not self.components:
            raise ConfigurationError(f"Rule '{self.id}' must declare components")
        if not self.default and not self.cities:
            raise ConfigurationError(f"Rule '{self.id}' must list at least one city")
        return self


class JurisdictionTable(ImmutableModel):
    """The full set of jurisdiction rules with a single default."""

    meta: Mapping[str, Any] = Field(default_factory=dict)
    rules: tuple[JurisdictionRule, ...]

    @model_validator(mode="after")
    def _validate_rules(self) -> JurisdictionTable:
        defaults = [rule.id for rule in self.rules if rule.default]
        if len(defaults) != 1:
            raise ConfigurationError(
                f"Exactly one default jurisdiction is required, found {len(defaults)}"
            )

        seen: dict[str, str] = {}
        for rule in self.rules:
            for city in rule.cities:
                if city in seen:
                    raise ConfigurationError(
                        f"City '{city}' assigned to both '{seen[city]}' and '{rule.id}'"
                    )
                seen[city] = rule.id
        return self

    @property
    def default_rule(self) -> JurisdictionRule:
        return next(rule for rule in self.rules if rule.default)

    def rule_for_city(self, city_name: str) -> JurisdictionRule:
        """Return the rule matching ``city_name`` or the default rule."""

        normalised = normalise_city_name(city_name)
        for rule in self.rules:
            if normalised in rule.cities:
                return rule
        return self.default_rule

    def get_rule(self, rule_id: str) -> JurisdictionRule:
        for rule in self.rules:
            if rule.id == rule_id:
                return rule
        raise KeyError(rule_id)


class CitySeed(ImmutableModel):
    """Raw city attributes from which a base CityRecord is computed."""

    name: str
    lat: float
    lng: float
    rent: int | float
    living: int | float
    sunshine: float = Field(default=0.0, ge=0)
    base_monthly_gross: float = Field(gt=0)
    salary_gross: Mapping[str, int | float] = Field(default_factory=dict)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ConfigurationError("City names cannot be blank")
        return stripped

    @field_validator("rent", "living")
    @classmethod
    def _non_negative_cost(cls, value: int | float) -> int | float:
        if value < 0:
            raise ConfigurationError("Monthly costs must be non-negative")
        return value


class SalaryFactors(ImmutableModel):
    """Multipliers applied to a city's base gross for each role and level."""

    roles: Mapping[Role, float]
    experience: Mapping[Experience, float]

    @model_validator(mode="after")
    def _validate_factors(self) -> SalaryFactors:
        missing_roles = [role.value for role in Role.concrete() if role not in self.roles]
        missing_levels = [
            level.value for level in Experience.concrete() if level not in self.experience
        ]
        if missing_roles or missing_levels:
            raise ConfigurationError(
                "Salary factors missing for: "
                + ", ".join(missing_roles + missing_levels)
            )
        for factor in (*self.roles.values(), *self.experience.values()):
            if factor <= 0:
                raise ConfigurationError("Salary factors must be positive")
        return self


class CityCatalogue(ImmutableModel):
    """Seed data for the base roster."""

    factors: SalaryFactors
    cities: tuple[CitySeed, ...]

    @model_validator(mode="after")
    def _validate_unique_names(self) -> CityCatalogue:
        names = [city.name for city in self.cities]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ConfigurationError(f"Duplicate city names: {', '.join(duplicates)}")
        return self


__all__ = [
    "CityCatalogue",
    "CitySeed",
    "ComponentKind",
    "ConfigurationError",
    "DeductionComponent",
    "ImmutableModel",
    "JurisdictionRule",
    "JurisdictionTable",
    "SalaryFactors",
    "TaxBracket",
    "normalise_city_name",
]
