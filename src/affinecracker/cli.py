from __future__ import annotations

import json
import logging
import sys
from typing import Optional

import typer

from affinecracker.classical import register_all
from affinecracker.core.config import get_settings, reset_settings
from affinecracker.core.errors import CipherError
from affinecracker.core.registry import brute_force, decrypt_known, encrypt_known, list_plugins
from affinecracker.core.results import NO_MATCH_MESSAGE
from affinecracker.core.scoring import is_plausible_english, word_hit_rate

app = typer.Typer(help="AffineCracker CLI: additive, multiplicative and affine ciphers + brute force.")

_CIPHER_HELP = "Cipher family: additive (caesar), multiplicative or affine."
_KEY_HELP = "Key: b for additive, a for multiplicative, 'a,b' for affine."


@app.callback()
def _init(
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Repeat for more logging."),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", envvar="AFFINECRACKER_LOG_LEVEL", help="Explicit logging level name."
    ),
):
    if log_level:
        level = getattr(logging, log_level.upper(), None)
        if not isinstance(level, int):
            raise typer.BadParameter(f"Unknown log level '{log_level}'.")
    else:
        level = logging.WARNING - 10 * min(verbose, 2)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", force=True)

    # Malformed AFFINECRACKER_* values fail here, before any command runs
    reset_settings()
    try:
        get_settings()
    except ValueError as e:
        raise typer.BadParameter(str(e))

    # Register plugins exactly once per CLI run
    register_all()


def _read_text(text: str) -> str:
    # "-" means stdin; drop only the trailing newline a shell pipe adds
    if text == "-":
        return sys.stdin.read().rstrip("\n")
    return text


@app.command()
def plugins():
    """List all registered cipher families."""
    for name in list_plugins():
        typer.echo(name)


@app.command()
def encrypt(
    cipher: str = typer.Option(..., "--cipher", "-c", help=_CIPHER_HELP),
    key: Optional[str] = typer.Option(None, "--key", "-k", help=_KEY_HELP),
    text: str = typer.Argument(..., help="Plaintext to encrypt ('-' reads stdin)."),
):
    """Encrypt with a known key."""
    try:
        ct = encrypt_known(cipher, _read_text(text), key)
    except CipherError as e:
        raise typer.BadParameter(str(e))
    typer.echo(ct)


@app.command()
def decrypt(
    cipher: str = typer.Option(..., "--cipher", "-c", help=_CIPHER_HELP),
    key: Optional[str] = typer.Option(None, "--key", "-k", help=_KEY_HELP),
    text: str = typer.Argument(..., help="Ciphertext to decrypt ('-' reads stdin)."),
):
    """Decrypt when you already know the cipher family and have the key."""
    try:
        pt = decrypt_known(cipher, _read_text(text), key)
    except CipherError as e:
        raise typer.BadParameter(str(e))
    typer.echo(pt)


@app.command()
def brute(
    text: str = typer.Argument(..., help="Ciphertext ('-' reads stdin)."),
    cipher: str = typer.Option(..., "--cipher", "-c", help=_CIPHER_HELP),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
):
    """Try every key of one cipher family and show the plausible decryptions."""
    try:
        result = brute_force(_read_text(text), cipher)
    except CipherError as e:
        raise typer.BadParameter(str(e))

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return

    if result.matched:
        typer.echo(result.labelled())
        return

    typer.echo(NO_MATCH_MESSAGE)
    typer.echo("-" * 60)
    typer.echo(result.listing())


@app.command()
def check(text: str = typer.Argument(..., help="Text to judge ('-' reads stdin).")):
    """Say whether text passes the plausible-English dictionary check."""
    text = _read_text(text)
    verdict = "plausible" if is_plausible_english(text) else "not plausible"
    typer.echo(f"{verdict}  word_hit_rate={word_hit_rate(text):.2f}")


def main():
    app()


if __name__ == "__main__":
    main()
