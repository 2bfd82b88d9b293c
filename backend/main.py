import sys
from dotenv import load_dotenv
from notifications.discord_client import DiscordError
from notifications.dispatch_cycle import JobDispatcher
from notifications.scheduler import start_job_posting_schedule
from shared.config import load_settings

load_dotenv()


def initialize() -> JobDispatcher:
    """Load configuration and check the bot can log in."""
    settings = load_settings()
    if not settings.discord_bot_token:
        raise ValueError("DISCORD_BOT_TOKEN must be set")

    dispatcher = JobDispatcher(settings)

    user = dispatcher.discord.fetch_current_user()
    print(f"Logged in as {user.get('username')}#{user.get('discriminator', '0')}!")

    for label, channel_id in settings.channel_bindings.items():
        status = channel_id or "not configured"
        print(f"  {label:<14} -> {status}")

    return dispatcher


def main() -> None:
    try:
        dispatcher = initialize()
    except (ValueError, DiscordError) as e:
        print(f"✗ Failed to initialize: {e}")
        sys.exit(1)

    start_job_posting_schedule(dispatcher)


if __name__ == "__main__":
    main()
