"""Typer-based command line interface for base64fix."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import structlog
import typer

from ..config import CONFIG_FILENAME, AppConfig, dump_default_config, load_config
from ..encoding import ALPHABETS, Encoding, encoding_for
from ..errors import ConfigError, UnknownAlphabetError
from ..logging import configure_logging
from ..paths import user_config_dir
from ..version import __version__

app = typer.Typer(help="Decode base64 that may be missing its trailing padding")
logger = structlog.get_logger("base64fix.cli")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"base64fix {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", metavar="PATH"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    try:
        ctx.obj = load_config(config)
    except ConfigError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    configure_logging(ctx.obj.logging.normalized_level())


def _resolve_encoding(config: AppConfig, alphabet: Optional[str]) -> tuple[str, Encoding]:
    name = alphabet or config.decode.alphabet
    try:
        return name, encoding_for(name)
    except UnknownAlphabetError:
        typer.echo(f"error: unknown alphabet {name!r}, expected one of: {', '.join(ALPHABETS)}", err=True)
        raise typer.Exit(code=2) from None


def _decode_stdin(encoding: Encoding) -> bytes:
    src = sys.stdin.buffer.read().strip()
    dst = bytearray(encoding.decoded_len(len(src)))
    count = encoding.decode(dst, src)
    return bytes(dst[:count])


@app.command()
def decode(
    ctx: typer.Context,
    value: Optional[str] = typer.Argument(None, help="Base64 input, read from stdin when omitted"),
    alphabet: Optional[str] = typer.Option(None, "--alphabet", "-a", help="std or url [default: from config]"),
    text: bool = typer.Option(False, "--text", help="Print the result as UTF-8 text"),
) -> None:
    name, encoding = _resolve_encoding(ctx.obj, alphabet)
    source = "stdin" if value is None else "argument"
    try:
        if value is None:
            decoded = _decode_stdin(encoding)
        else:
            decoded = encoding.decode_string(value.strip())
    except ValueError as exc:
        logger.error("decode.failed", alphabet=name, source=source, error=str(exc))
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    logger.debug("decode.ok", alphabet=name, source=source, size=len(decoded))

    if text:
        typer.echo(decoded.decode("utf-8", errors="replace"))
    else:
        sys.stdout.buffer.write(decoded)
        sys.stdout.buffer.flush()


@app.command()
def init_config(
    destination: Path = typer.Option(
        user_config_dir() / CONFIG_FILENAME, "--destination", help="Where to write the default config"
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    if destination.exists() and not force:
        typer.echo(f"error: {destination} already exists, use --force to overwrite", err=True)
        raise typer.Exit(code=1)
    dump_default_config(destination)
    typer.echo(f"Default config written to {destination}")


@app.command()
def version() -> None:
    typer.echo(f"base64fix {__version__}")


if __name__ == "__main__":  # pragma: no cover
    app()
