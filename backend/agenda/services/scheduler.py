"""Greedy first-fit placement of weekly tasks into daily working windows."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Sequence

from agenda.api.schemas.weekly_plan import CATEGORY_PRIORITY, TimeSlotPayload, WeeklyTaskPayload
from agenda.services.week_calendar import get_week_days, minutes_to_time, time_to_minutes
from agenda.services.working_hours import DEFAULT_WORKING_HOURS, WorkingHours

logger = logging.getLogger(__name__)

_CATEGORY_RANK: Dict[str, int] = {category: rank for rank, category in enumerate(CATEGORY_PRIORITY)}


@dataclass
class FreeBlock:
    start: int
    end: int

    @property
    def available(self) -> int:
        return self.end - self.start


@dataclass
class DayAvailability:
    day: date
    free_blocks: List[FreeBlock] = field(default_factory=list)


def schedule_tasks(
    tasks: Sequence[WeeklyTaskPayload],
    week_start: date | str,
    *,
    hours: WorkingHours = DEFAULT_WORKING_HOURS,
    reserve_existing_slots: bool = False,
) -> List[WeeklyTaskPayload]:
    """
    Assign a slot to every task that does not have one yet.

    Tasks are placed in category priority order (personal first, ideation last, input order
    among equals), each into the earliest free block Monday-Friday that can hold its full
    duration. Tasks that already carry a slot are returned untouched and, unless
    ``reserve_existing_slots`` is set, do not consume capacity. Tasks that fit nowhere come
    back without a slot. The result follows the input order; input objects are never mutated.
    """
    days = build_week_availability(week_start, hours)
    if reserve_existing_slots:
        for task in tasks:
            if task.scheduled_slot is not None:
                reserve_slot(days, task.scheduled_slot)

    placement_order = sorted(range(len(tasks)), key=lambda index: category_rank(tasks[index].category))
    results: List[WeeklyTaskPayload] = list(tasks)
    unscheduled = 0
    for index in placement_order:
        task = tasks[index]
        if task.scheduled_slot is not None:
            continue
        slot = allocate(days, duration_minutes(task.estimated_hours))
        if slot is None:
            unscheduled += 1
            logger.debug("No capacity left for task %s (%sh)", task.id, task.estimated_hours)
        else:
            logger.debug("Placed task %s on %s %s-%s", task.id, slot.day, slot.start, slot.end)
        results[index] = task.model_copy(update={"scheduled_slot": slot})

    if unscheduled:
        logger.info("%s of %s tasks could not be scheduled for week %s", unscheduled, len(tasks), week_start)
    return results


def build_week_availability(week_start: date | str, hours: WorkingHours = DEFAULT_WORKING_HOURS) -> List[DayAvailability]:
    """Return one DayAvailability per work day with a morning and an afternoon block."""
    morning_start, morning_end = hours.morning_minutes()
    afternoon_start, afternoon_end = hours.afternoon_minutes()
    return [
        DayAvailability(
            day=day,
            free_blocks=[FreeBlock(morning_start, morning_end), FreeBlock(afternoon_start, afternoon_end)],
        )
        for day in get_week_days(week_start)
    ]


def allocate(days: List[DayAvailability], duration_min: int) -> TimeSlotPayload | None:
    """Take ``duration_min`` from the first block that can hold it, shrinking that block."""
    for day in days:
        for block in day.free_blocks:
            if block.available >= duration_min:
                slot_start = block.start
                block.start = slot_start + duration_min
                return TimeSlotPayload(
                    day=day.day,
                    start=minutes_to_time(slot_start),
                    end=minutes_to_time(block.start),
                )
    return None


def reserve_slot(days: List[DayAvailability], slot: TimeSlotPayload) -> None:
    """Remove an already-assigned slot from the free blocks of its day, splitting blocks if needed."""
    slot_start = time_to_minutes(slot.start)
    slot_end = time_to_minutes(slot.end)
    if slot_end <= slot_start:
        return
    for day in days:
        if day.day != slot.day:
            continue
        remaining: List[FreeBlock] = []
        for block in day.free_blocks:
            if slot_end <= block.start or slot_start >= block.end:
                remaining.append(block)
                continue
            if block.start < slot_start:
                remaining.append(FreeBlock(block.start, slot_start))
            if slot_end < block.end:
                remaining.append(FreeBlock(slot_end, block.end))
        day.free_blocks = remaining
        return


def duration_minutes(hours: float) -> int:
    # half-up rounding to the nearest minute
    return max(0, int(math.floor(hours * 60 + 0.5)))


def category_rank(category: str) -> int:
    return _CATEGORY_RANK.get(category, len(CATEGORY_PRIORITY))


def unscheduled_tasks(tasks: Sequence[WeeklyTaskPayload]) -> List[WeeklyTaskPayload]:
    return [task for task in tasks if task.scheduled_slot is None]
