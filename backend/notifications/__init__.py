"""
Discord job notifications for JobRadar.

This module handles:
- Selecting job postings that are due for posting
- Routing them to audience channels by experience level
- Posting paced Discord embeds with obfuscated redirect links
- Marking posted jobs so they are never selected again
"""

from .dispatch_cycle import JobDispatcher
from .link_codec import LinkCodec

__all__ = [
    'JobDispatcher',
    'LinkCodec',
]
