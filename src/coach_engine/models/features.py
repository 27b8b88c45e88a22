"""Per-muscle-group readiness feature row."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GroupFeatures:
    """Readiness features for one muscle group on a reference date.

    Attributes:
        group: Muscle group label.
        days_since_last: Whole days since the group was last trained
            (99 if it never was).
        seven_day_volume: Sum of weight x reps over the trailing 7 days.
        volume_norm: seven_day_volume scaled into [0, 1] around the median.
        avg_reps_norm: Reps of the most recent set, scaled over [5, 15].
        ready_label: 1 if rested and not overloaded, else 0.
    """

    group: str
    days_since_last: int
    seven_day_volume: float
    volume_norm: float
    avg_reps_norm: float
    ready_label: int

    @property
    def x(self) -> tuple[int, float, float]:
        """Feature vector (days_since_last, volume_norm, avg_reps_norm)."""
        return (self.days_since_last, self.volume_norm, self.avg_reps_norm)

    @property
    def is_ready(self) -> bool:
        return self.ready_label == 1
