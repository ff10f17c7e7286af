"""Command dispatch for the YouAreEll command line."""
from typing import Callable, Dict, List, Optional

from ..shared.schemas import Message
from ..shared.utils import format_message, format_user, now_timestamp
from .api import APIClient
from .errors import ArgumentCountError, MalformedArgumentsError, UnknownCommandError, UsageError
from .watch import FeedWatcher

HELP_TEXT = """You may run any of these commands:
   help                          | Show this help.
   ids                           | List the users.
   ids <github-id>               | List the user ID for the given GitHub ID.
   ids <name> <github-id>        | Register the given name for the GitHub ID.
   messages                      | List the most recent messages.
   messages <github-id>          | List the messages for the given GitHub ID.
   send <from> <message>         | Send a message from the given GitHub ID.
   send <from> <message> to <to> | Send a message from the given GitHub ID to the other GitHub ID.
   watch                         | Watch for new messages.
   watch <github-id>             | Watch for new messages for the given GitHub ID."""


def _optional_github_id(args: List[str]) -> Optional[str]:
    if len(args) > 1:
        raise ArgumentCountError("0 or 1", len(args))
    return args[0] if args else None


def process_help(client: APIClient, args: List[str]) -> None:
    if args:
        raise ArgumentCountError("0", len(args))
    print(HELP_TEXT)


def process_users(client: APIClient, args: List[str]) -> None:
    if len(args) == 0:
        for user in client.list_users():
            print(format_user(user))
    elif len(args) == 1:
        print(f"ID: {client.get_user_id(args[0])}")
    elif len(args) == 2:
        name, github_id = args
        client.register(name, github_id)
        print(f"Registered {name} as {github_id}.")
    else:
        raise ArgumentCountError("0, 1 or 2", len(args))


def process_messages(client: APIClient, args: List[str]) -> None:
    github_id = _optional_github_id(args)
    for msg in client.list_messages(github_id):
        print(format_message(msg))


def build_message(args: List[str]) -> Message:
    """Build the outgoing message for ``send <from> <text> [to <to>]``."""
    if len(args) not in (2, 4):
        raise ArgumentCountError("2 or 4", len(args))
    from_id, text = args[0], args[1]
    to_id = None
    if len(args) == 4:
        if args[2] != "to":
            raise MalformedArgumentsError(f"expected 'to'; got {args[2]}")
        to_id = args[3]
    # The server rejects messages without a timestamp.
    return Message(timestamp=now_timestamp(), from_id=from_id, to_id=to_id, message=text)


def process_send(client: APIClient, args: List[str]) -> None:
    sent = client.send_message(build_message(args))
    print(format_message(sent))


def process_watch(client: APIClient, args: List[str]) -> None:
    FeedWatcher(client, _optional_github_id(args)).run()


COMMANDS: Dict[str, Callable[[APIClient, List[str]], None]] = {
    "help": process_help,
    "ids": process_users,
    "messages": process_messages,
    "send": process_send,
    "watch": process_watch,
}


def process(client: APIClient, args: List[str]) -> None:
    """Run one command; the first token is the verb, the rest its arguments."""
    if not args:
        raise UsageError("no command specified")
    verb, rest = args[0], list(args[1:])
    handler = COMMANDS.get(verb)
    if handler is None:
        raise UnknownCommandError(verb)
    handler(client, rest)
