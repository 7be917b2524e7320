"""Composite savings for geo-arbitrage and digital-nomad comparisons.

With an anchor city selected, every candidate's savings for the active role
key mix the anchor's side with the candidate's side:

* ``work`` mode earns the anchor's net salary while paying the candidate's
  rent and living costs;
* ``home`` mode earns the candidate's net salary while paying the anchor's
  rent and living costs, which replace the candidate's own figures.

The transform is recomputed from scratch on every call and never edits the
records it receives.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from citysavings.backend.app.models import ArbitrageMode, CityRecord
from citysavings.backend.roles import RoleKey, role_key_string

_LOGGER = logging.getLogger(__name__)


def find_anchor(roster: Iterable[CityRecord], anchor_city_name: str | None) -> CityRecord | None:
    """Return the first record named exactly ``anchor_city_name``."""

    if not anchor_city_name:
        return None
    return next((city for city in roster if city.name == anchor_city_name), None)


def _pass_through(roster: Sequence[CityRecord]) -> tuple[CityRecord, ...]:
    return tuple(
        city.model_copy(update={"is_arbitrage_base": False}, deep=True) for city in roster
    )


def _composite_record(
    candidate: CityRecord,
    anchor: CityRecord,
    key: str,
    mode: ArbitrageMode,
) -> CityRecord:
    if mode is ArbitrageMode.WORK:
        composite = anchor.net_for(key) - candidate.rent - candidate.living
        update: dict[str, object] = {}
    else:
        composite = candidate.net_for(key) - anchor.rent - anchor.living
        update = {"rent": anchor.rent, "living": anchor.living}

    update["savings"] = {**candidate.savings, key: composite}
    update["is_arbitrage_base"] = candidate.name == anchor.name
    return candidate.model_copy(update=update, deep=True)


def derive_adjusted_roster(
    roster: Sequence[CityRecord],
    role_key: str | RoleKey,
    nomad_mode_enabled: bool,
    mode: ArbitrageMode | str,
    anchor_city_name: str | None,
) -> tuple[CityRecord, ...]:
    """Return a new roster whose savings reflect the selected anchor.

    The roster is passed through unchanged (apart from clearing
    ``is_arbitrage_base``) when nomad mode is off, the anchor is empty or the
    anchor does not name a city in ``roster``. Input order is preserved.
    """

    selected_mode = ArbitrageMode(mode)
    key = role_key_string(role_key)

    if not nomad_mode_enabled or not anchor_city_name:
        return _pass_through(roster)

    anchor = find_anchor(roster, anchor_city_name)
    if anchor is None:
        _LOGGER.debug("Anchor city %r not in roster; passing roster through", anchor_city_name)
        return _pass_through(roster)

    return tuple(
        _composite_record(candidate, anchor, key, selected_mode) for candidate in roster
    )


__all__ = ["derive_adjusted_roster", "find_anchor"]
