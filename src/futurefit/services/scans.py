"""Scan history service."""

from dataclasses import dataclass
from typing import Protocol

from futurefit.domain.errors import ValidationError
from futurefit.domain.scans import ScanRecord, ScanResult


class ScanRepository(Protocol):
    """Persistence interface for scan results."""

    def append(self, user_id: str, result: ScanResult) -> ScanRecord:
        """Store a scan result and return the persisted record."""

    def list(self, user_id: str, limit: int) -> list[ScanRecord]:
        """Return scan records for a user, most recent first."""

    def count(self, user_id: str) -> int:
        """Return the total number of stored scans for a user."""


@dataclass
class ScanService:
    """Service for recording and listing body composition scans."""

    repository: ScanRepository

    def record(self, user_id: str, result: ScanResult) -> ScanRecord:
        """Validate and persist a scan result."""
        if not 0.0 < result.body_fat_percentage < 100.0:
            raise ValidationError(
                "body_fat_percentage",
                f"{result.body_fat_percentage} is outside (0, 100)",
            )
        if not 0.0 <= result.confidence <= 1.0:
            raise ValidationError(
                "confidence", f"{result.confidence} is outside [0, 1]"
            )
        return self.repository.append(user_id, result)

    def history(self, user_id: str, limit: int = 50) -> list[ScanRecord]:
        """Return recent scans, most recent first."""
        return self.repository.list(user_id, limit)

    def count(self, user_id: str) -> int:
        """Return how many scans the user has recorded."""
        return self.repository.count(user_id)

    def latest(self, user_id: str) -> ScanRecord | None:
        """Return the most recent scan, if any."""
        records = self.repository.list(user_id, 1)
        return records[0] if records else None
