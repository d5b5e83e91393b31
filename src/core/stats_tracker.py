"""
DeskBurst - Show Statistics
Counts what happened during each show, kept in memory for the current run
"""

from dataclasses import dataclass, asdict
from typing import List

from src.core.logger import get_logger


@dataclass
class ShowStats:
    """Counters for a single show."""
    ticks: int = 0
    immediate_spawns: int = 0
    launch_spawns: int = 0
    replacement_spawns: int = 0
    explosions: int = 0
    fireworks_reaped: int = 0
    peak_particles: int = 0

    @property
    def total_spawns(self) -> int:
        return self.immediate_spawns + self.launch_spawns + self.replacement_spawns

    def to_dict(self) -> dict:
        return asdict(self)

    def summary(self) -> str:
        return (f"{self.ticks} ticks, {self.total_spawns} fireworks "
                f"({self.immediate_spawns} immediate, {self.launch_spawns} launched, "
                f"{self.replacement_spawns} replacements), {self.explosions} explosions, "
                f"{self.fireworks_reaped} reaped, peak {self.peak_particles} sparks")


class StatsTracker:
    """Collects finished shows for the lifetime of the app."""

    def __init__(self):
        self.shows: List[ShowStats] = []

    def record_show(self, stats: ShowStats):
        self.shows.append(stats)
        get_logger().info(f"Show #{len(self.shows)} finished: {stats.summary()}")

    @property
    def total_shows(self) -> int:
        return len(self.shows)

    @property
    def total_fireworks(self) -> int:
        return sum(s.total_spawns for s in self.shows)

    @property
    def total_explosions(self) -> int:
        return sum(s.explosions for s in self.shows)

    def summary(self) -> str:
        return (f"{self.total_shows} shows, {self.total_fireworks} fireworks, "
                f"{self.total_explosions} explosions")
