"""Console client for the YouAreEll message board."""
import logging
from typing import Annotated, Callable

import typer
from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from ..shared.utils import tokenize
from .api import APIClient
from .commands import process
from .config import DEFAULT_BASE_URL, PROMPT
from .errors import YouAreEllError
from .logging_config import configure_logging

logger = logging.getLogger(__name__)
app = typer.Typer(add_completion=False, help="Command-line client for the YouAreEll message board.")


def report(exc: YouAreEllError) -> None:
    print(f"Error: [{exc.kind}] {exc}")


def run_interactive(client: APIClient, read_line: Callable[[str], str]) -> None:
    """Read, tokenize and run lines until ``exit`` or end of input.

    Errors are reported and the loop keeps going. Ctrl-C abandons the current
    line or stops a running watch and returns to the prompt.
    """
    while True:
        try:
            line = read_line(PROMPT)
        except KeyboardInterrupt:
            continue
        except EOFError:
            break
        line = line.strip()
        if not line:
            continue
        if line == "exit":
            break
        tokens = tokenize(line)
        logger.debug("[Tokens: %s]", tokens)
        try:
            process(client, tokens)
        except YouAreEllError as exc:
            report(exc)
        except KeyboardInterrupt:
            print()


# Options are only read before the verb; everything after it belongs to the command.
@app.command(
    context_settings={"allow_extra_args": True, "allow_interspersed_args": False, "ignore_unknown_options": True},
)
def main(
    ctx: typer.Context,
    interactive: Annotated[bool, typer.Option("--interactive", help="Enable the interactive console.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable verbose logging.")] = False,
    base_url: Annotated[str, typer.Option("--base-url", help="Server base URL.")] = DEFAULT_BASE_URL,
) -> None:
    """Run one command, or start the interactive console."""
    configure_logging(verbose)
    with APIClient(base_url) as client:
        if interactive:
            session = PromptSession(history=InMemoryHistory())
            run_interactive(client, session.prompt)
            return

        try:
            process(client, list(ctx.args))
        except YouAreEllError as exc:
            report(exc)
            raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
