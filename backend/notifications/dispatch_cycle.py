"""
One Select -> Route -> Deliver -> Commit pass over due job postings.

Usage:
    # Post everything that is due right now
    uv run python -m notifications.dispatch_cycle

    # Pretend it's a different time (ISO timestamp, UTC if no offset)
    uv run python -m notifications.dispatch_cycle --now 2026-01-21T15:01:00Z

    # Dry run (select and format, don't post or mark anything)
    uv run python -m notifications.dispatch_cycle --dry-run
"""

import argparse
import threading
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from notifications.category_router import route_jobs, routed_job_ids
from notifications.commit import mark_jobs_as_posted
from notifications.delivery import deliver_jobs
from notifications.discord_client import DiscordClient
from notifications.job_selector import select_jobs_to_post
from notifications.link_codec import LinkCodec
from notifications.pacing import RateLimiter
from shared.config import DispatchSettings, load_settings
from shared.db import get_supabase_client
from shared.utils import parse_timestamp, print_summary


class CycleState(str, Enum):
    IDLE = "idle"
    SELECTING = "selecting"
    ROUTING = "routing"
    DELIVERING = "delivering"
    COMMITTING = "committing"


class JobDispatcher:
    """
    Runs dispatch cycles against one data store and one Discord bot.

    Only one cycle runs at a time: a trigger that arrives while a cycle is in
    progress is skipped, since two overlapping cycles could both select the
    same not-yet-committed job.
    """

    def __init__(
        self,
        settings: DispatchSettings,
        supabase: Any = None,
        discord: Optional[DiscordClient] = None,
        codec: Optional[LinkCodec] = None,
    ):
        self.settings = settings
        self.supabase = supabase or get_supabase_client(
            settings.supabase_url,
            settings.supabase_service_key,
            timeout=settings.database_timeout_seconds,
        )
        if discord is None and settings.discord_bot_token:
            discord = DiscordClient(
                settings.discord_bot_token, timeout=settings.send_timeout_seconds
            )
        self.discord = discord
        self.codec = codec or LinkCodec.from_settings(settings)
        self.state = CycleState.IDLE
        self._lock = threading.Lock()

    def _limiter(self) -> RateLimiter:
        return RateLimiter(self.settings.send_interval_seconds)

    def run_cycle(
        self, now: Optional[datetime] = None, dry_run: bool = False
    ) -> Optional[dict[str, int]]:
        """
        Run one dispatch cycle.

        Args:
            now: Reference time for the selection window (default: current UTC time,
                naive values are taken as UTC)
            dry_run: If True, don't post to Discord or mark jobs as posted

        Returns:
            Stats dict (found, sent, failed, skipped, committed), or None if
            another cycle was already running
        """
        if not self._lock.acquire(blocking=False):
            print("⚠️  Previous dispatch cycle still running, skipping this trigger")
            return None

        try:
            now = now or datetime.now(timezone.utc)
            if now.tzinfo is None:
                now = now.replace(tzinfo=timezone.utc)
            return self._run(now, dry_run)
        finally:
            self.state = CycleState.IDLE
            self._lock.release()

    def _run(self, now: datetime, dry_run: bool) -> dict[str, int]:
        stats = {"found": 0, "sent": 0, "failed": 0, "skipped": 0, "committed": 0}

        print("Checking for jobs to post to Discord...")
        self.state = CycleState.SELECTING
        jobs = select_jobs_to_post(self.supabase, now)

        if not jobs:
            print("No new jobs to post at this time.")
            return stats

        stats["found"] = len(jobs)
        print(f"Found {len(jobs)} jobs to post to Discord.")

        self.state = CycleState.ROUTING
        buckets = route_jobs(jobs)
        attempted = routed_job_ids(buckets)

        if not dry_run and self.discord is None:
            raise ValueError("DISCORD_BOT_TOKEN must be set to post jobs")

        # Routed jobs are committed even if delivery stops partway
        self.state = CycleState.DELIVERING
        try:
            report = deliver_jobs(
                buckets,
                self.settings.channel_bindings,
                self.discord,
                self.codec,
                self.settings.redirect_base_url,
                limiter_factory=self._limiter,
                dry_run=dry_run,
            )
            stats["sent"] = report.sent
            stats["failed"] = report.failed
            stats["skipped"] = report.skipped
        finally:
            self.state = CycleState.COMMITTING
            if dry_run:
                print(f"[DRY RUN] Would mark {len(attempted)} jobs as posted")
            elif mark_jobs_as_posted(self.supabase, attempted):
                stats["committed"] = len(attempted)

        print_summary(stats)
        return stats


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Post due job postings to Discord once")

    parser.add_argument(
        "--now",
        type=str,
        help="Reference time for the selection window (ISO format, defaults to now in UTC)",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Dry run mode (don't post to Discord or mark jobs as posted)",
    )

    args = parser.parse_args()

    now = None
    if args.now:
        now = parse_timestamp(args.now)
        if now is None:
            parser.error(f"Could not parse --now value: {args.now}")

    dispatcher = JobDispatcher(load_settings())
    dispatcher.run_cycle(now=now, dry_run=args.dry_run)


if __name__ == "__main__":
    main()
