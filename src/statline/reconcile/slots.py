"""Placement of matched athletes into the fixed 1..99 display slots."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional, Sequence

from statline.jerseys import SLOT_COUNT, jersey_to_slot, slot_label
from statline.models import MatchedAthlete


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlotRow:
    slot: int
    display_jersey: str
    athlete: Optional[MatchedAthlete] = None

    @property
    def is_empty(self) -> bool:
        return self.athlete is None


@dataclass(frozen=True)
class SlotAssignment:
    rows: List[SlotRow] = field(default_factory=list)
    inactive: List[MatchedAthlete] = field(default_factory=list)

    def occupied(self) -> List[SlotRow]:
        return [row for row in self.rows if row.athlete is not None]

    def row(self, slot: int) -> SlotRow:
        if not 1 <= slot <= SLOT_COUNT:
            raise KeyError(slot)
        return self.rows[slot - 1]


def assign_slots(athletes: Sequence[MatchedAthlete]) -> SlotAssignment:
    """Give each athlete a slot, or put it on the inactive list.

    An athlete claims its natural slot when nobody else with the same slot
    ranks ahead of it: an athlete with stats beats one without, and roster
    order breaks ties. Losers and invalid jerseys queue in roster order and
    take the lowest free slot; once the slots run out the rest are inactive.
    """

    claims: Dict[int, int] = {}
    for index, athlete in enumerate(athletes):
        slot = jersey_to_slot(athlete.roster.number)
        if slot is None:
            continue
        holder = claims.get(slot)
        if holder is None or (athlete.has_stats and not athletes[holder].has_stats):
            claims[slot] = index

    placed: Dict[int, MatchedAthlete] = {slot: athletes[index] for slot, index in claims.items()}
    winners = set(claims.values())
    queue: Deque[MatchedAthlete] = deque(
        athlete for index, athlete in enumerate(athletes) if index not in winners
    )

    inactive: List[MatchedAthlete] = []
    free = (slot for slot in range(1, SLOT_COUNT + 1) if slot not in placed)
    while queue:
        athlete = queue.popleft()
        slot = next(free, None)
        if slot is None:
            inactive.append(athlete)
            inactive.extend(queue)
            break
        placed[slot] = athlete
        logger.debug("Moved %s (#%s) to open slot %s", athlete.roster.full_name, athlete.roster.number or "-", slot)

    if inactive:
        logger.info("%s athlete(s) could not be placed and are inactive", len(inactive))

    rows = []
    for slot in range(1, SLOT_COUNT + 1):
        athlete = placed.get(slot)
        if athlete is None:
            rows.append(SlotRow(slot=slot, display_jersey=slot_label(slot)))
        else:
            rows.append(SlotRow(slot=slot, display_jersey=athlete.roster.number or slot_label(slot), athlete=athlete))
    return SlotAssignment(rows=rows, inactive=inactive)
