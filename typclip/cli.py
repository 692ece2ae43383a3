#!/usr/bin/env python3
"""
Typst Math to Clipboard CLI

Compiles a Typst math snippet to an image and copies it to the clipboard.
The snippet comes from the single positional argument or, when it is
omitted, from standard input (read to end-of-stream).

Examples:\n

    typst-clip 'x^2 + y^2 = z^2'                 # Snippet as argument

    echo 'dv(f, x) = 2x' | typst-clip            # Snippet from stdin

    typst-clip < equation.typ                    # Snippet from a file
"""

from typing import IO, Optional

import typer
from loguru import logger
from typing_extensions import Annotated

from typclip import config
from typclip.contexts.rendering.logger import setup_rendering_logger
from typclip.exceptions import TypclipError
from typclip.pipeline import copy_snippet_to_clipboard

SUCCESS_MESSAGE = "Image copied to clipboard successfully!"


def read_snippet(typst_code: Optional[str], stream: Optional[IO[str]] = None) -> str:
    """Return the argument verbatim, or all of stdin when no argument was given."""
    if typst_code is not None:
        return typst_code
    if stream is None:
        stream = typer.get_text_stream("stdin")
    return stream.read()


app = typer.Typer(
    help="Render Typst math and copy the image to the clipboard",
    add_completion=False,
)


@app.command()
def main(
    typst_code: Annotated[
        Optional[str],
        typer.Argument(
            help="Typst code to compile (read from stdin when omitted)",
            show_default=False,
        ),
    ] = None,
):
    """
    Render Typst math and copy the image to the clipboard.

    Examples:\n

        $ typst-clip 'sum_(k=1)^n k = (n(n+1))/2'

        $ echo 'grad f = vb(0)' | typst-clip
    """
    setup_rendering_logger(config.LOG_DIR, console_level=config.LOG_LEVEL)

    try:
        snippet = read_snippet(typst_code)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read stdin: {e!r}")
        typer.secho(f"Error: could not read standard input: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    try:
        copy_snippet_to_clipboard(snippet)
    except TypclipError as e:
        logger.debug(f"Exiting on {type(e).__name__}")
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(SUCCESS_MESSAGE)


if __name__ == "__main__":
    app()
