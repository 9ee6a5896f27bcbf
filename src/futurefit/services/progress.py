"""Progress summaries over scan history."""

from dataclasses import dataclass

from futurefit.domain.profiles import Goal, Profile, Sex, parse_goal
from futurefit.domain.scans import ScanRecord
from futurefit.services.scans import ScanService

LOSE_FAT_START = 25.0
GAIN_MUSCLE_START = 10.0
LOSE_FAT_TARGETS = {Sex.MALE: 12.0, Sex.FEMALE: 18.0}
GAIN_MUSCLE_TARGETS = {Sex.MALE: 15.0, Sex.FEMALE: 22.0}
MAINTAIN_PROGRESS = 50.0


@dataclass(frozen=True)
class ProgressSummary:
    """Dashboard view of a user's scan history."""

    latest: ScanRecord | None
    body_fat_change: float
    goal_progress: float
    total_scans: int


@dataclass
class ProgressService:
    """Service that summarizes scan history against a goal."""

    scan_service: ScanService
    history_limit: int = 100

    def summarize(self, user_id: str, profile: Profile | None) -> ProgressSummary:
        """Return latest scan, change since the previous scan and goal progress."""
        records = self.scan_service.history(user_id, limit=self.history_limit)
        latest = records[0] if records else None
        change = 0.0
        if len(records) > 1:
            change = (
                records[0].result.body_fat_percentage
                - records[1].result.body_fat_percentage
            )
        progress = 0.0
        if latest is not None and profile is not None:
            progress = goal_progress(profile, latest.result.body_fat_percentage)
        return ProgressSummary(
            latest=latest,
            body_fat_change=change,
            goal_progress=progress,
            total_scans=self.scan_service.count(user_id),
        )


def goal_progress(profile: Profile, body_fat: float) -> float:
    """Return progress toward the profile's goal as a percentage in [0, 100]."""
    goal = parse_goal(profile.goal)
    if goal == Goal.LOSE_FAT:
        target = LOSE_FAT_TARGETS[profile.sex]
        raw = (LOSE_FAT_START - body_fat) / (LOSE_FAT_START - target) * 100
    elif goal == Goal.GAIN_MUSCLE:
        target = GAIN_MUSCLE_TARGETS[profile.sex]
        raw = (body_fat - GAIN_MUSCLE_START) / (target - GAIN_MUSCLE_START) * 100
    else:
        return MAINTAIN_PROGRESS
    return max(0.0, min(100.0, raw))
