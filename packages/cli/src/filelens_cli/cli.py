"""CLI entry point for filelens.

    filelens <path>
    filelens -filename <path> [-preset quick|thorough|security|performance]

The review flags keep their single-dash spelling, so they are not declared
as click options: click collects them untouched and process_review does
the flag lookup itself.
"""

from __future__ import annotations

import importlib.metadata
import logging
from typing import Optional

import click
from rich.console import Console

from filelens_core.config import DEFAULT_PRESET, PRESETS, create_reviewer_config, load_config
from filelens_core.either import Either, Left, Right
from filelens_core.models import ReviewResponse
from filelens_core.providers.base import BaseProvider
from filelens_core.reviewer import display_review_result, review_file
from filelens_core.utils.validation import is_valid_input

console = Console(highlight=False, soft_wrap=True)
logger = logging.getLogger(__name__)

USAGE = (
    "Usage: filelens -filename <path> [-preset <name>]\n"
    "Examples:\n"
    "  filelens -filename src/utils.ts\n"
    "  filelens -preset performance -filename src/utils.ts"
)

_FILENAME_FLAGS = ("-filename", "--filename")
_PRESET_FLAGS = ("-preset", "--preset")


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _get_flag_value(args: list[str], flags: tuple[str, ...]) -> Optional[str]:
    for flag in flags:
        if flag in args:
            idx = args.index(flag)
            return args[idx + 1] if idx + 1 < len(args) else None
    return None


def _first_positional(args: list[str]) -> Optional[str]:
    """Return the first argument that is neither a flag nor a flag's value."""
    skip_next = False
    for arg in args:
        if skip_next:
            skip_next = False
            continue
        if arg in _FILENAME_FLAGS or arg in _PRESET_FLAGS:
            skip_next = True
            continue
        if arg.startswith("-"):
            continue
        return arg
    return None


def _resolve_preset(args: list[str], config: dict) -> str:
    # An explicit -preset wins over the config file; an unknown name means quick.
    candidate = _get_flag_value(args, _PRESET_FLAGS)
    if candidate is None:
        candidate = config.get("preset")
    return candidate if candidate in PRESETS else DEFAULT_PRESET


def validate_command_line_args(args: list[str]) -> Either[str, str]:
    filename = _get_flag_value(args, _FILENAME_FLAGS) or _first_positional(args)
    if not filename:
        return Left(USAGE)
    if not is_valid_input(filename):
        return Left("Invalid filename provided")
    return Right(filename)


def process_review(
    args: list[str],
    config: Optional[dict] = None,
    provider: Optional[BaseProvider] = None,
) -> Either[str, ReviewResponse]:
    """Run one review from raw CLI arguments and print the outcome.

    Returns ``Right(response)`` when the review succeeded and
    ``Left(message)`` for usage errors and failed reviews alike.
    """
    config = config or {}
    preset = _resolve_preset(args, config)

    validated = validate_command_line_args(args)
    if isinstance(validated, Left):
        console.print(validated.error, markup=False)
        return validated
    filename = validated.value

    reviewer_config = create_reviewer_config(
        preset,
        model=config.get("model"),
        max_tokens=config.get("max_tokens"),
        focus=config.get("focus"),
    )
    logger.debug("Using preset %r: %s", preset, reviewer_config)
    console.print(f"🔍 Reviewing {filename}...", markup=False)

    result = review_file(reviewer_config, filename, provider=provider)
    display_review_result(result)
    if result.success:
        return Right(result)
    return Left(result.error)


@click.command(context_settings={"ignore_unknown_options": True})
@click.version_option(
    version=importlib.metadata.version("filelens"),
    prog_name="filelens",
)
@click.option(
    "--config",
    "config_path",
    default=".filelens.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="FILELENS_CONFIG",
)
@click.option("--verbose", is_flag=True, help="Enable debug logging.")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def main(ctx: click.Context, config_path: str, verbose: bool, args: tuple[str, ...]):
    """AI code review for a single source file.

    \b
    Review flags:
      -filename <path>   file to review (or pass the path positionally)
      -preset <name>     quick (default), thorough, security, performance

    \b
    Required environment variables:
      OPENAI_API_KEY       for gpt-* models (all built-in presets)
      ANTHROPIC_API_KEY    for claude-* models set via the config file
    """
    _setup_logging(verbose)

    try:
        raw_args = list(args)
        config = load_config(config_path, cli_overrides={"preset": _get_flag_value(raw_args, _PRESET_FLAGS)})
        result = process_review(raw_args, config=config)
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        console.print(f"Unexpected error: {e}", markup=False)
        ctx.exit(1)

    if isinstance(result, Left):
        ctx.exit(1)
    return result.value
