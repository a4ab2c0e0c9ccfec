from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime

from agenda.api.schemas.weekly_plan import TimeSlotPayload, WeeklyTaskPayload
from agenda.services.scheduler import (
    build_week_availability,
    duration_minutes,
    schedule_tasks,
    unscheduled_tasks,
)
from agenda.services.week_calendar import time_to_minutes
from agenda.services.working_hours import WorkingHours

MONDAY = date(2026, 2, 16)


def _task(task_id: str, category: str = "creation", hours: float = 1.0, slot: TimeSlotPayload | None = None) -> WeeklyTaskPayload:
    return WeeklyTaskPayload(
        id=task_id,
        title=f"Task {task_id}",
        category=category,
        estimated_hours=hours,
        scheduled_slot=slot,
    )


def _slot(day: date, start: str, end: str) -> TimeSlotPayload:
    return TimeSlotPayload(day=day, start=start, end=end)


def test_single_task_lands_monday_morning():
    result = schedule_tasks([_task("a", "creation", 2.0)], MONDAY)
    assert result[0].scheduled_slot == _slot(MONDAY, "09:00", "11:00")


def test_same_category_tasks_keep_input_order_in_morning_block():
    result = schedule_tasks([_task("a", "personal", 3.0), _task("b", "personal", 1.0)], MONDAY)
    assert result[0].scheduled_slot == _slot(MONDAY, "09:00", "12:00")
    assert result[1].scheduled_slot == _slot(MONDAY, "12:00", "13:00")


def test_empty_task_list_returns_empty_list():
    assert schedule_tasks([], MONDAY) == []


def test_accepts_iso_week_start():
    result = schedule_tasks([_task("a", hours=1.0)], "2026-02-16")
    assert result[0].scheduled_slot.day == MONDAY


def test_rescheduling_a_fully_scheduled_week_is_a_no_op():
    tasks = [_task("a", "ideation", 2.5), _task("b", "personal", 4.0), _task("c", "management", 1.25)]
    first = schedule_tasks(tasks, MONDAY)
    second = schedule_tasks(first, MONDAY)
    assert second == first
    assert all(after is before for after, before in zip(second, first))


def test_output_order_matches_input_order():
    tasks = [
        _task("ideate", "ideation"),
        _task("read", "consumption"),
        _task("build", "creation"),
        _task("meet", "management"),
        _task("gym", "personal"),
    ]
    result = schedule_tasks(tasks, MONDAY)
    assert [task.id for task in result] == ["ideate", "read", "build", "meet", "gym"]


def test_higher_priority_category_claims_earlier_slot():
    tasks = [_task("idea", "ideation", 3.0), _task("life", "personal", 3.0)]
    result = schedule_tasks(tasks, MONDAY)
    by_id = {task.id: task for task in result}
    assert by_id["life"].scheduled_slot == _slot(MONDAY, "09:00", "12:00")
    # 90 minutes remain in the morning, so the ideation task moves to the afternoon
    assert by_id["idea"].scheduled_slot == _slot(MONDAY, "15:30", "18:30")


def test_task_that_does_not_fit_remaining_morning_uses_afternoon_then_next_day():
    tasks = [_task("a", hours=4.0), _task("b", hours=1.0), _task("c", hours=4.5), _task("d", hours=4.5)]
    result = schedule_tasks(tasks, MONDAY)
    assert result[0].scheduled_slot == _slot(MONDAY, "09:00", "13:00")
    assert result[1].scheduled_slot == _slot(MONDAY, "15:30", "16:30")
    assert result[2].scheduled_slot == _slot(date(2026, 2, 17), "09:00", "13:30")
    assert result[3].scheduled_slot == _slot(date(2026, 2, 17), "15:30", "20:00")


def test_capacity_is_conserved_and_lunch_is_never_used():
    hours_cycle = [0.5, 1.25, 2.0, 3.75, 0.75, 4.5]
    categories = ["personal", "management", "creation", "consumption", "ideation"]
    tasks = [
        _task(f"t{index}", categories[index % len(categories)], hours_cycle[index % len(hours_cycle)])
        for index in range(40)
    ]
    result = schedule_tasks(tasks, MONDAY)

    morning = (time_to_minutes("09:00"), time_to_minutes("13:30"))
    afternoon = (time_to_minutes("15:30"), time_to_minutes("20:00"))
    lunch = (time_to_minutes("13:30"), time_to_minutes("15:30"))
    used = defaultdict(int)
    placed_by_day = defaultdict(list)
    for task in result:
        slot = task.scheduled_slot
        if slot is None:
            continue
        start, end = time_to_minutes(slot.start), time_to_minutes(slot.end)
        assert end - start == duration_minutes(task.estimated_hours)
        assert not (start < lunch[1] and end > lunch[0])
        if morning[0] <= start and end <= morning[1]:
            used[(slot.day, "morning")] += end - start
        else:
            assert afternoon[0] <= start and end <= afternoon[1]
            used[(slot.day, "afternoon")] += end - start
        placed_by_day[slot.day].append((start, end))

    assert all(total <= 270 for total in used.values())
    for intervals in placed_by_day.values():
        intervals.sort()
        for (_, prev_end), (next_start, _) in zip(intervals, intervals[1:]):
            assert prev_end <= next_start


def test_overflow_leaves_excess_tasks_unscheduled():
    tasks = [_task(f"t{index}", "creation", 4.5) for index in range(11)]
    result = schedule_tasks(tasks, MONDAY)
    assert all(task.scheduled_slot is not None for task in result[:10])
    assert result[10].scheduled_slot is None
    assert [task.id for task in unscheduled_tasks(result)] == ["t10"]
    assert result[9].scheduled_slot == _slot(date(2026, 2, 20), "15:30", "20:00")


def test_task_longer_than_any_block_is_left_unscheduled():
    result = schedule_tasks([_task("huge", hours=5.0), _task("small", hours=1.0)], MONDAY)
    assert result[0].scheduled_slot is None
    assert result[1].scheduled_slot == _slot(MONDAY, "09:00", "10:00")


def test_pre_slotted_task_is_kept_and_does_not_consume_capacity():
    existing = _slot(date(2026, 2, 18), "16:00", "17:00")
    tasks = [_task("fixed", "ideation", 1.0, slot=existing), _task("new", "creation", 2.0)]
    result = schedule_tasks(tasks, MONDAY)
    assert result[0] is tasks[0]
    assert result[0].scheduled_slot == existing
    assert result[1].scheduled_slot == _slot(MONDAY, "09:00", "11:00")


def test_pre_slotted_task_may_overlap_by_default():
    tasks = [_task("fixed", slot=_slot(MONDAY, "09:00", "11:00")), _task("new", hours=2.0)]
    result = schedule_tasks(tasks, MONDAY)
    assert result[1].scheduled_slot == _slot(MONDAY, "09:00", "11:00")


def test_reserve_existing_slots_avoids_double_booking():
    tasks = [
        _task("fixed", slot=_slot(MONDAY, "10:00", "11:00")),
        _task("one", hours=1.0),
        _task("two", hours=2.0),
    ]
    result = schedule_tasks(tasks, MONDAY, reserve_existing_slots=True)
    assert result[0].scheduled_slot == _slot(MONDAY, "10:00", "11:00")
    assert result[1].scheduled_slot == _slot(MONDAY, "09:00", "10:00")
    assert result[2].scheduled_slot == _slot(MONDAY, "11:00", "13:00")


def test_reserve_existing_slots_ignores_slots_outside_the_week():
    tasks = [_task("old", slot=_slot(date(2026, 2, 9), "09:00", "13:30")), _task("new", hours=1.0)]
    result = schedule_tasks(tasks, MONDAY, reserve_existing_slots=True)
    assert result[1].scheduled_slot == _slot(MONDAY, "09:00", "10:00")


def test_zero_duration_task_gets_zero_length_slot():
    result = schedule_tasks([_task("quick", hours=0.0)], MONDAY)
    assert result[0].scheduled_slot == _slot(MONDAY, "09:00", "09:00")


def test_input_tasks_are_not_mutated():
    tasks = [_task("a", hours=1.0), _task("b", "personal", 2.0)]
    schedule_tasks(tasks, MONDAY)
    assert all(task.scheduled_slot is None for task in tasks)


def test_free_text_fields_are_carried_through():
    task = WeeklyTaskPayload(
        id="a",
        title="Write launch post",
        category="creation",
        estimated_hours=1.0,
        stakeholders=["Ana", "Raj"],
        blocks="Launch email",
        requested_by="Marketing",
        notes="Draft first",
        status="in-progress",
    )
    result = schedule_tasks([task], MONDAY)[0]
    assert result.model_dump(exclude={"scheduled_slot"}) == task.model_dump(exclude={"scheduled_slot"})


def test_custom_working_hours_change_capacity():
    hours = WorkingHours(morning_start="08:00", morning_end="10:00", afternoon_start="11:00", afternoon_end="12:00")
    result = schedule_tasks([_task("long", hours=3.0), _task("fits", hours=2.0)], MONDAY, hours=hours)
    assert result[0].scheduled_slot is None
    assert result[1].scheduled_slot == _slot(MONDAY, "08:00", "10:00")


def test_build_week_availability_has_two_blocks_per_work_day():
    days = build_week_availability(MONDAY)
    assert [day.day for day in days] == [date(2026, 2, 16 + offset) for offset in range(5)]
    for day in days:
        assert [(block.start, block.end) for block in day.free_blocks] == [(540, 810), (930, 1200)]


def test_duration_rounds_to_nearest_minute():
    assert duration_minutes(2.0) == 120
    assert duration_minutes(0.25) == 15
    assert duration_minutes(1.01) == 61
    assert duration_minutes(0.0) == 0


def test_week_start_given_as_datetime_yields_date_slots():
    result = schedule_tasks([_task("a", hours=1.0)], datetime(2026, 2, 16, 7, 45))
    assert result[0].scheduled_slot == _slot(MONDAY, "09:00", "10:00")
