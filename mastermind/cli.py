"""
Terminal front end.

    mastermind [--mode local|api] [--seed N] [--cheat] [--max K]
               [--base URL] [--apikey KEY] [--autodelete] [-v]

MM_BASE_URL and MM_API_KEY fill in --base and --apikey when those flags are absent.
"""

import logging
import sys
from enum import Enum
from typing import Optional

import typer

from .config import API_KEY_ENV, BASE_URL_ENV, DEFAULT_BASE_URL
from .loop import CommandLoop, LoopState
from .oracle import LocalOracle
from .remote import MastermindClient, OracleError, RemoteOracle
from .store import GameSession
from .types import CODE_LENGTH, DIGIT_RANGE
from .validation import code_to_str

RULES = f"""Rules:
  - You must guess a {CODE_LENGTH}-digit code with digits from {DIGIT_RANGE[0]}-{DIGIT_RANGE[1]}.
  - Feedback includes B and W: B=correct digit in correct position, W=correct digit in wrong position.
  - Type 'exit' at any time to quit."""

HELP_OPTIONS = {"help_option_names": ["-h", "--help"]}

app = typer.Typer(help="Mastermind (Terminal)", add_completion=False, context_settings=HELP_OPTIONS)


class Mode(str, Enum):
    local = "local"
    api = "api"


VERBOSE_FORMAT = " [API] %(message)s"
QUIET_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool) -> logging.Logger:
    """Request logging goes to stdout under --verbose; otherwise only warnings show."""
    logger = logging.getLogger("mastermind")
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    logger.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(VERBOSE_FORMAT if verbose else QUIET_FORMAT))
    logger.addHandler(handler)
    return logger


def print_banner(max_attempts: Optional[int]) -> None:
    low, high = DIGIT_RANGE
    typer.echo(" Mastermind - Terminal Version")
    typer.echo("-" * 38)
    typer.echo(f"Rules: Guess the {CODE_LENGTH}-digit code with digits from {low} to {high}. "
               "You get B/W feedback after each guess.")
    typer.echo("Type 'exit' to quit at any time. For help, use --help")
    if max_attempts is not None:
        typer.echo(f"Number of attempts is limited to {max_attempts}.")


def run_local(seed: Optional[int] = None, cheat: bool = False, max_attempts: Optional[int] = None) -> LoopState:
    session = GameSession.new(seed=seed)
    if cheat:
        typer.echo(f" Secret (for testing only): {code_to_str(session.secret)}")
    return CommandLoop(LocalOracle(session), max_attempts=max_attempts).run()


def run_api(
    client: MastermindClient,
    max_attempts: Optional[int] = None,
    autodelete: bool = False,
) -> LoopState:
    typer.echo(f" API Mode - Server: {client.base_url}")
    try:
        game_id = client.create_game()
    except OracleError as err:
        typer.echo(f" Failed to create game: {err}")
        client.close()
        return LoopState.ABORTED

    typer.echo(f" Game created: {game_id}")
    try:
        return CommandLoop(RemoteOracle(client, game_id), max_attempts=max_attempts).run()
    finally:
        if autodelete:
            client.delete_game(game_id)
        client.close()


@app.command(epilog=RULES, context_settings=HELP_OPTIONS)
def main(
    mode: Mode = typer.Option(Mode.local, "--mode", case_sensitive=False, help="Run in local or api mode."),
    seed: Optional[int] = typer.Option(None, "--seed", min=0, help="Generate code with a fixed seed (local mode only)."),
    cheat: bool = typer.Option(False, "--cheat", help="Display the secret code (local mode only)."),
    max_attempts: Optional[int] = typer.Option(None, "--max", min=1, help="Limit the number of attempts."),
    base: str = typer.Option(DEFAULT_BASE_URL, "--base", envvar=BASE_URL_ENV, help="API server base URL."),
    apikey: Optional[str] = typer.Option(None, "--apikey", envvar=API_KEY_ENV, help="API key, if required."),
    autodelete: bool = typer.Option(False, "--autodelete", help="DELETE /game/{id} after the game ends."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
):
    """Guess the secret code against a local generator or a game server."""
    configure_logging(verbose)
    print_banner(max_attempts)

    if mode is Mode.local:
        run_local(seed=seed, cheat=cheat, max_attempts=max_attempts)
    else:
        client = MastermindClient(base, api_key=apikey)
        run_api(client, max_attempts=max_attempts, autodelete=autodelete)
