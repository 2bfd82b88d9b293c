from datetime import datetime, timezone
from dateutil import parser as date_parser


def parse_timestamp(value: str) -> datetime | None:
    """Parse various date formats into an aware datetime (UTC when no zone is given)."""
    if not value:
        return None
    try:
        dt = date_parser.parse(value)
    except (ValueError, OverflowError, TypeError):
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def print_summary(stats: dict[str, int]) -> None:
    """Print dispatch cycle summary."""
    print(f"\n{'=' * 60}")
    print(f"[{datetime.now()}] Dispatch Cycle Complete")
    print(f"{'=' * 60}")
    print(f"Found:     {stats.get('found', 0)}")
    print(f"✓ Sent:    {stats.get('sent', 0)}")
    print(f"✗ Failed:  {stats.get('failed', 0)}")
    print(f"⊘ Skipped: {stats.get('skipped', 0)}")
    print(f"Committed: {stats.get('committed', 0)}")
    print(f"{'=' * 60}\n")
