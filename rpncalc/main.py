import logging
from typing import Optional, TextIO

import click

from rpncalc.calculator import evaluate, parse, to_postfix
from rpncalc.config import Config, LogLevel, load
from rpncalc.errors import CalcError, ConfigError, TokenizeError
from rpncalc.helper import error_message, format_value
from rpncalc.token import format_tokens

logger = logging.getLogger(__name__)

LEVELS = [LogLevel.ERROR, LogLevel.WARNING, LogLevel.INFO, LogLevel.DEBUG]


def configure_logging(level: LogLevel, verbose: int = 0) -> None:
    index = min(LEVELS.index(level) + verbose, len(LEVELS) - 1)
    logging.basicConfig(
        level=LEVELS[index].value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )


def process_line(line: str, cfg: Config, output: TextIO) -> None:
    logger.debug(f"processing {line.rstrip()!r}")
    try:
        tokens = parse(line)
    except TokenizeError as e:
        click.echo(error_message(line, e.location, e.message), err=True, nl=False)
        return
    postfix = to_postfix(tokens)
    if cfg.show_postfix:
        click.echo(format_tokens(postfix), file=output)
    try:
        value = evaluate(postfix)
    except CalcError as e:
        click.echo(error_message(line, e.location, e.message), err=True, nl=False)
        return
    if value is not None:
        click.echo(format_value(value), file=output)


def run(input_file: TextIO, output: TextIO, cfg: Config) -> None:
    interactive = input_file.isatty()
    while True:
        if cfg.prompt and interactive:
            click.echo(cfg.prompt, err=True, nl=False)
        line = input_file.readline()
        if not line:
            break
        line = line.rstrip("\r\n")
        if cfg.skip_blank_lines and not line.strip():
            continue
        process_line(line, cfg, output)


@click.command()
@click.argument("filename", type=click.File("r", errors="replace"), default="-")
@click.option("-o", "--output", type=click.File("w"), default="-")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, readable=True),
    default=None,
    help="Optional python configuration file overriding the defaults",
)
@click.option(
    "--show-postfix/--no-show-postfix",
    default=None,
    help="Print the postfix form of each expression before its value",
)
@click.option("-v", "--verbose", count=True, help="Increase log verbosity")
def main(
    filename: TextIO,
    output: TextIO,
    config: Optional[str],
    show_postfix: Optional[bool],
    verbose: int,
):
    """
    Evaluate one arithmetic expression per line, e.g. ``(2 + 3) * 4``.
    """
    try:
        cfg = load(config)
    except ConfigError as e:
        raise click.UsageError(str(e))
    if show_postfix is not None:
        cfg.show_postfix = show_postfix
    configure_logging(cfg.log_level, verbose)

    run(filename, output, cfg)


if __name__ == "__main__":
    main()
