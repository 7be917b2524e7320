"""Composite role keys selecting entries of per-role salary mappings.

Salary, net and savings maps are keyed by ``"<role>_<experience>"`` strings
such as ``"software_engineer_senior"``. The ``"average_average"`` sentinel
selects the per-city mean. :class:`RoleKey` keeps the two halves typed while
preserving that string format at every external boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Job families tracked in the salary catalogue."""

    SOFTWARE_ENGINEER = "software_engineer"
    DATA_PROFESSIONAL = "data_professional"
    PRODUCT_MANAGER = "product_manager"
    DESIGNER = "designer"
    DEVOPS = "devops"
    AVERAGE = "average"

    @classmethod
    def concrete(cls) -> tuple[Role, ...]:
        return tuple(member for member in cls if member is not cls.AVERAGE)


class Experience(str, Enum):
    """Seniority bands tracked in the salary catalogue."""

    JUNIOR = "junior"
    MID = "mid"
    SENIOR = "senior"
    LEAD = "lead"
    AVERAGE = "average"

    @classmethod
    def concrete(cls) -> tuple[Experience, ...]:
        return tuple(member for member in cls if member is not cls.AVERAGE)


@dataclass(frozen=True)
class RoleKey:
    """A ``{role, experience}`` pair with the legacy string encoding."""

    role: Role
    experience: Experience

    def __post_init__(self) -> None:
        object.__setattr__(self, "role", Role(self.role))
        object.__setattr__(self, "experience", Experience(self.experience))
        if (self.role is Role.AVERAGE) != (self.experience is Experience.AVERAGE):
            raise ValueError("The average role key must pair 'average' with 'average'")

    def __str__(self) -> str:
        return f"{self.role.value}_{self.experience.value}"

    @classmethod
    def average(cls) -> RoleKey:
        return cls(Role.AVERAGE, Experience.AVERAGE)

    @property
    def is_average(self) -> bool:
        return self.role is Role.AVERAGE

    @classmethod
    def parse(cls, value: str | RoleKey) -> RoleKey:
        """Parse ``"<role>_<experience>"`` into a key, rejecting unknown parts."""

        if isinstance(value, RoleKey):
            return value

        text = value.strip().lower()
        role_part, separator, experience_part = text.rpartition("_")
        if not separator:
            raise ValueError(f"Role key '{value}' must look like '<role>_<experience>'")

        try:
            return cls(Role(role_part), Experience(experience_part))
        except ValueError as exc:
            raise ValueError(f"Unknown role key '{value}': {exc}") from exc

    @classmethod
    def concrete_keys(cls) -> tuple[RoleKey, ...]:
        """Every role/experience combination except the average sentinel."""

        return tuple(
            cls(role, experience)
            for role in Role.concrete()
            for experience in Experience.concrete()
        )


AVERAGE_ROLE_KEY = str(RoleKey.average())


def role_key_string(value: str | RoleKey) -> str:
    """Return the map key for ``value`` without validating raw strings."""

    return str(value) if isinstance(value, RoleKey) else value


__all__ = [
    "AVERAGE_ROLE_KEY",
    "Experience",
    "Role",
    "RoleKey",
    "role_key_string",
]
