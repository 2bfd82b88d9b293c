"""
Error logging utility for the dispatch pipeline.

Logs dispatch errors (selection, channel resolution, sending, commit) to
timestamped files for debugging. A report that can't be written is only
printed, so reporting never interrupts a cycle.
"""

import os
from datetime import datetime
from typing import Any


def default_log_dir() -> str:
    """DISPATCH_LOG_DIR, or ./logs under the current working directory."""
    return os.getenv("DISPATCH_LOG_DIR") or os.path.join(os.getcwd(), "logs")


def log_dispatch_error(
    error_type: str,
    error_message: str,
    context: dict[str, Any] | None = None,
    log_dir: str | None = None,
) -> str | None:
    """
    Log a dispatch error to a timestamped file.

    Args:
        error_type: Type of error (e.g., 'selection', 'channel', 'sending', 'commit')
        error_message: The error message
        context: Optional dictionary with additional context (job_id, channel_id, etc.)
        log_dir: Directory for reports (default: see default_log_dir)

    Returns:
        Path to the log file created, or None if it couldn't be written
    """
    log_dir = log_dir or default_log_dir()

    # Microseconds keep reports from one busy cycle apart
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    filename = os.path.join(log_dir, f"dispatch_error_{error_type}_{timestamp}.txt")

    try:
        os.makedirs(log_dir, exist_ok=True)
        with open(filename, "w", encoding="utf-8") as f:
            f.write(f"Dispatch Error Report - {datetime.now()}\n")
            f.write("=" * 60 + "\n\n")
            f.write(f"Error Type: {error_type}\n")
            f.write(f"Error Message: {error_message}\n\n")

            if context:
                f.write("Context:\n")
                f.write("-" * 60 + "\n")
                for key, value in context.items():
                    f.write(f"{key}: {value}\n")
    except OSError as e:
        print(f"  ⚠ Could not write {error_type} error report to {log_dir}: {e}")
        return None

    return filename
