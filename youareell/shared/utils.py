"""Shared utility functions."""
import re
from datetime import datetime
from typing import List, Optional

from .schemas import Message, User

BROADCAST_MARKER = "*"

# Unquoted runs, or double- or single-quoted spans kept whole.
TOKEN_PATTERN = re.compile(r"""[^\s"']+|"([^"]*)"|'([^']*)'""")


def tokenize(line: str) -> List[str]:
    """Split a command line into tokens, honoring single and double quotes."""
    tokens = []
    for match in TOKEN_PATTERN.finditer(line):
        double, single = match.group(1), match.group(2)
        if double is not None:
            tokens.append(double)
        elif single is not None:
            tokens.append(single)
        else:
            tokens.append(match.group(0))
    return tokens


def now_timestamp(now: Optional[datetime] = None) -> str:
    """Return local wall-clock time as ISO-8601 with its timezone offset."""
    now = now or datetime.now().astimezone()
    return now.isoformat(timespec="seconds")


def format_message(msg: Message) -> str:
    recipient = msg.to_id or BROADCAST_MARKER
    return f"Message: {msg.timestamp} {msg.sequence or '-'} {msg.from_id} -> {recipient}: {msg.message}"


def format_user(user: User) -> str:
    return f"User: {user.user_id}: {user.github_id} ({user.name})"
