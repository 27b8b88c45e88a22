"""FeatureBuilder — per-muscle-group readiness features for today.

Produces one feature row per muscle group from the raw training history:
recency, trailing 7-day volume (absolute and median-normalised), the rep
count of the last set, and a binary "ready to train" label.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Sequence

from coach_engine.math.normalization import median, normalize
from coach_engine.math.training_volume import (
    as_calendar_date,
    days_since,
    last_entry_for_group,
    window_volume,
)
from coach_engine.models.enums import (
    DEFAULT_MIN_REST_DAYS,
    DEFAULT_REPS,
    MIN_REST_DAYS,
    READY_VOLUME_FACTOR,
    REPS_NORM_HIGH,
    REPS_NORM_LOW,
    VOLUME_NORM_MEDIAN_MULTIPLE,
)
from coach_engine.models.features import GroupFeatures
from coach_engine.models.workout_entry import WorkoutEntry


def minimum_rest_days(group: str) -> int:
    """Minimum rest days before *group* is trainable again (default 2)."""
    return MIN_REST_DAYS.get(group, DEFAULT_MIN_REST_DAYS)


def distinct_groups(entries: Sequence[WorkoutEntry]) -> tuple[str, ...]:
    """Muscle groups present in *entries*, in first-seen order."""
    return tuple(dict.fromkeys(e.muscle_group for e in entries))


def build_today_features(
    entries: Sequence[WorkoutEntry],
    groups: Sequence[str] = (),
    today: date | datetime | None = None,
) -> tuple[GroupFeatures, ...]:
    """Build one readiness feature row per muscle group.

    Algorithm:
    1. Groups default to the distinct groups observed in *entries*.
    2. 7-day volume per group over [today - 7d, today].
    3. Median basis = median of those volumes, or 1 if the median is 0.
    4. Per group: days since last set (99 if none), volume normalised over
       [0, 2 x basis], last set's reps normalised over [5, 15] (10 if none).
    5. Ready if rested for ``minimum_rest_days`` and volume <= 1.25 x basis.

    Args:
        entries: Full training history.
        groups: Explicit groups to score. Empty means "all observed groups".
        today: Reference date (default: today).

    Returns:
        A tuple of GroupFeatures, one per group, in group order.
    """
    reference = as_calendar_date(today)
    target_groups = tuple(groups) if groups else distinct_groups(entries)

    volumes = {
        g: window_volume(entries, g, reference) for g in target_groups
    }
    volume_basis = median(volumes.values()) or 1.0

    rows: list[GroupFeatures] = []
    for group in target_groups:
        last = last_entry_for_group(entries, group)
        days = days_since(last.date if last else None, reference)

        volume = volumes[group]
        volume_norm = normalize(
            volume, 0.0, volume_basis * VOLUME_NORM_MEDIAN_MULTIPLE,
        )

        last_reps = last.reps if last is not None else DEFAULT_REPS
        reps_norm = normalize(last_reps, REPS_NORM_LOW, REPS_NORM_HIGH)

        rested = days >= minimum_rest_days(group)
        not_overloaded = volume <= volume_basis * READY_VOLUME_FACTOR

        rows.append(GroupFeatures(
            group=group,
            days_since_last=days,
            seven_day_volume=volume,
            volume_norm=volume_norm,
            avg_reps_norm=reps_norm,
            ready_label=1 if rested and not_overloaded else 0,
        ))

    return tuple(rows)
