"""Race catalog."""

from __future__ import annotations

from durland.domain.enums import RaceName
from durland.domain.models import Race

SHLENDRICS = Race(RaceName.SHLENDRICS)
HIPSTICS = Race(RaceName.HIPSTICS)
SKUFICS = Race(RaceName.SKUFICS)

RACES: dict[RaceName, Race] = {race.name: race for race in (SHLENDRICS, HIPSTICS, SKUFICS)}


def get_race(name: RaceName | str) -> Race:
    """Look up a race by name; unknown names raise ``ValueError``."""

    return RACES[RaceName(name)]
