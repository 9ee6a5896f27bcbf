"""Supabase-backed scan result repository."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from futurefit.domain.scans import Measurements, ScanRecord, ScanResult
from futurefit.services.scans import ScanRepository

_COLUMNS = (
    "id, user_id, body_fat_percentage, measurements, confidence_score, "
    "is_fallback, scanned_at, created_at"
)


@dataclass
class SupabaseScanRepository(ScanRepository):
    """Supabase implementation for scan history."""

    client: Client

    def append(self, user_id: str, result: ScanResult) -> ScanRecord:
        """Insert a scan result row and return the stored record."""
        response = (
            self.client.table("scan_results")
            .insert(
                {
                    "user_id": user_id,
                    "body_fat_percentage": result.body_fat_percentage,
                    "measurements": result.measurements.to_dict()
                    if result.measurements
                    else None,
                    "confidence_score": result.confidence,
                    "is_fallback": result.is_fallback,
                    "scanned_at": result.timestamp.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create scan result")
        return _parse_row(response.data[0])

    def list(self, user_id: str, limit: int) -> list[ScanRecord]:
        """Return scan rows for a user, most recent first."""
        response = (
            self.client.table("scan_results")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .order("scanned_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def count(self, user_id: str) -> int:
        """Return the number of scan rows for a user."""
        response = (
            self.client.table("scan_results")
            .select("id", count="exact")
            .eq("user_id", user_id)
            .execute()
        )
        return response.count or 0


def _parse_row(row: dict[str, object]) -> ScanRecord:
    measurements_raw = row.get("measurements")
    measurements = (
        Measurements.from_dict(measurements_raw)
        if isinstance(measurements_raw, dict)
        else None
    )
    return ScanRecord(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        result=ScanResult(
            body_fat_percentage=float(row["body_fat_percentage"]),
            measurements=measurements,
            confidence=float(row.get("confidence_score") or 0.0),
            timestamp=_parse_datetime(row, "scanned_at"),
            is_fallback=bool(row.get("is_fallback", False)),
        ),
        created_at=_parse_datetime(row, "created_at"),
    )


def _parse_datetime(row: dict[str, object], column: str) -> datetime:
    raw = row.get(column)
    if not isinstance(raw, str) or not raw:
        raise RuntimeError(f"Scan row {row.get('id')} is missing {column}")
    return datetime.fromisoformat(raw)
