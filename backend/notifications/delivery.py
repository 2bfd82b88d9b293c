"""
Delivery of routed jobs to their Discord channels.

Sends are sequential and paced per channel. A failed channel lookup or send
is reported and skipped - nothing is retried within the cycle. Every routed
job counts as attempted, including jobs whose audience has no channel
configured, so the commit step marks them posted either way. Jobs for an
unbound audience are therefore dropped, not retried later.
"""

from typing import Callable, Optional

from models.job import JobRecord
from models.notification import DeliveryReport
from models.types import AudienceLabel, ChannelBindings
from notifications.category_router import routed_job_ids
from notifications.discord_client import DiscordClient, DiscordError
from notifications.embed_builder import build_job_embed
from notifications.error_logger import log_dispatch_error
from notifications.link_codec import LinkCodec
from notifications.pacing import RateLimiter

DEFAULT_SEND_INTERVAL = 1.0


def deliver_jobs(
    buckets: dict[AudienceLabel, list[JobRecord]],
    channel_bindings: ChannelBindings,
    discord: Optional[DiscordClient],
    codec: LinkCodec,
    redirect_base_url: str,
    limiter_factory: Optional[Callable[[], RateLimiter]] = None,
    dry_run: bool = False,
) -> DeliveryReport:
    """
    Post every routed job to the channel bound to its audience.

    Args:
        buckets: Jobs per audience label (from route_jobs)
        channel_bindings: Audience label -> channel id (None/missing = not configured)
        discord: Discord client (may be None in dry-run mode)
        codec: Link codec for redirect URLs
        redirect_base_url: Public base URL of the redirect service
        limiter_factory: Builds one pacing limiter per channel
        dry_run: If True, format embeds but don't send anything

    Returns:
        DeliveryReport with attempted ids and sent/failed/skipped counts
    """
    if limiter_factory is None:

        def limiter_factory() -> RateLimiter:
            return RateLimiter(DEFAULT_SEND_INTERVAL)

    report = DeliveryReport(attempted_ids=routed_job_ids(buckets))

    for label, jobs in buckets.items():
        if not jobs:
            continue

        channel_id = channel_bindings.get(label)
        if not channel_id:
            print(f"  ⊘ No channel configured for '{label}', skipping {len(jobs)} jobs")
            report.skipped += len(jobs)
            continue

        if dry_run:
            for job in jobs:
                build_job_embed(job, codec, redirect_base_url)
                print(f"  [DRY RUN] Would post job {job.id} to '{label}' ({channel_id})")
            report.sent += len(jobs)
            continue

        print(f"\nPosting {len(jobs)} jobs to '{label}' ({channel_id})...")

        try:
            channel = discord.fetch_channel(channel_id)
        except DiscordError as e:
            print(f"  ✗ Could not resolve channel {channel_id}: {e}")
            report.failed += len(jobs)
            log_dispatch_error(
                error_type="channel",
                error_message=str(e),
                context={
                    "audience": label,
                    "channel_id": channel_id,
                    "job_ids": [job.id for job in jobs],
                },
            )
            continue

        limiter = limiter_factory()
        for job in jobs:
            limiter.wait()
            try:
                channel.send(build_job_embed(job, codec, redirect_base_url))
            except DiscordError as e:
                print(f"  ✗ Failed to post job {job.id}: {e}")
                report.failed += 1
                log_dispatch_error(
                    error_type="sending",
                    error_message=str(e),
                    context={"audience": label, "channel_id": channel_id, "job_id": job.id},
                )
                continue

            print(f"  ✓ Posted job {job.id}: {job.job_title[:50]}")
            report.sent += 1

    return report
