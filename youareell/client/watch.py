"""Polling loop that surfaces new messages on a feed."""
import logging
import time
from typing import Callable, List, Optional

from ..shared.schemas import Message
from ..shared.utils import format_message
from .api import APIClient
from .config import WATCH_INTERVAL_SECONDS

logger = logging.getLogger(__name__)


class FeedWatcher:
    """Tracks the newest sequence seen on one feed.

    Feeds are newest-first. The first non-empty poll only records the cursor
    so that startup does not dump the whole history.
    """

    def __init__(
        self,
        client: APIClient,
        github_id: Optional[str] = None,
        interval: float = WATCH_INTERVAL_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.client = client
        self.github_id = github_id
        self.interval = interval
        self.sleep = sleep
        self.most_recent_sequence: Optional[str] = None

    def new_messages(self, feed: List[Message]) -> List[Message]:
        """Return the unseen part of ``feed`` and advance the cursor."""
        if not feed:
            return []

        fresh: List[Message] = []
        if self.most_recent_sequence is not None:
            for msg in feed:
                if msg.sequence == self.most_recent_sequence:
                    break
                fresh.append(msg)
            else:
                logger.warning(
                    "Last seen sequence %s is no longer in the feed; some messages may have been missed.",
                    self.most_recent_sequence,
                )
        if feed[0].sequence is not None:
            self.most_recent_sequence = feed[0].sequence
        return fresh

    def poll(self) -> List[Message]:
        feed = self.client.list_messages(self.github_id)
        fresh = self.new_messages(feed)
        for msg in fresh:
            print(format_message(msg))
        return fresh

    def run(self) -> None:
        """Poll forever; API errors propagate and end the loop."""
        while True:
            self.poll()
            self.sleep(self.interval)
