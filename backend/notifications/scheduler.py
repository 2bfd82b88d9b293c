"""
Hourly schedule for the dispatch cycle.

Runs once at startup, then every hour at DISPATCH_CRON_MINUTE. APScheduler
runs jobs on a worker thread, so a slow cycle never holds up the timer;
max_instances=1 plus coalescing means a trigger that fires mid-cycle is
dropped rather than run in parallel.
"""

from datetime import datetime
from zoneinfo import ZoneInfo

from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.cron import CronTrigger

from notifications.dispatch_cycle import JobDispatcher

JOB_ID = "discord-job-posting"


def build_scheduler(dispatcher: JobDispatcher) -> BlockingScheduler:
    """Create a scheduler with the dispatch job registered (not started)."""
    tz = ZoneInfo(dispatcher.settings.timezone)
    scheduler = BlockingScheduler(timezone=tz)
    scheduler.add_job(
        dispatcher.run_cycle,
        CronTrigger(minute=dispatcher.settings.cron_minute, timezone=tz),
        id=JOB_ID,
        max_instances=1,
        coalesce=True,
        misfire_grace_time=300,
        # Eager first run at startup, then the cron cadence
        next_run_time=datetime.now(tz),
    )
    return scheduler


def start_job_posting_schedule(dispatcher: JobDispatcher) -> None:
    """Start the blocking schedule. Returns on Ctrl-C / SIGTERM."""
    scheduler = build_scheduler(dispatcher)

    print(f"\n{'=' * 60}")
    print("Starting job posting schedule...")
    print(f"{'=' * 60}")
    print(f"Cadence:  every hour at minute {dispatcher.settings.cron_minute}")
    print(f"Timezone: {dispatcher.settings.timezone}")
    print(f"{'=' * 60}\n")

    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        print("Scheduler stopped.")
