import sys
from typing import List, Optional

import typer

from ..core import config
from ..core.config import Settings
from ..core.errors import ModelLoadError
from ..core.logging import log, setup_logging
from ..loader import LANGUAGES, load, load_file
from ..segmentation.parser import Parser

app = typer.Typer(add_completion=False, help="Softbreak CLI")


@app.callback()
def _init(
    config_file: Optional[str] = typer.Option(
        None,
        "--config",
        help="Config file (.softbreak.yaml auto-discovered)",
    ),
    log_format: Optional[str] = typer.Option(None, "--log-format", help="json|plain|auto"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="debug|info|warning|error"),
) -> None:
    """Segment text written without spaces into soft line-break chunks."""
    config.SETTINGS = Settings.load_config(config_file)
    try:
        setup_logging(
            log_format or config.SETTINGS.LOG_FORMAT,  # type: ignore[arg-type]
            log_level or config.SETTINGS.LOG_LEVEL,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e


@app.command()
def version() -> None:
    from .. import __version__

    typer.echo(__version__)


@app.command()
def langs() -> None:
    """List vendored language tables and whether each can be loaded."""
    for language in LANGUAGES:
        try:
            load(language)
            status = "available"
        except ModelLoadError:
            status = "unavailable"
        typer.echo(f"{language}\t{status}")


def _read_input(text: Optional[List[str]]) -> str:
    if text:
        return " ".join(text)
    return sys.stdin.read().rstrip()


@app.command()
def parse(
    text: Optional[List[str]] = typer.Argument(None, help="Text to segment (default: stdin)"),
    lang: Optional[str] = typer.Option(
        None, "--lang", "-l", help=f"Vendored model: {', '.join(LANGUAGES)}"
    ),
    model_path: Optional[str] = typer.Option(None, "--model", "-m", help="Path to model JSON"),
    separator: Optional[str] = typer.Option(
        None, "--separator", "-s", help="Chunk separator (default: '|')"
    ),
    html: bool = typer.Option(False, "--html", help="Treat input as HTML and insert break markers"),
    threshold: Optional[int] = typer.Option(None, "--threshold", help="Boundary score threshold"),
) -> None:
    """
    Split text with a vendored language model or a model JSON file.

    Prints the chunks joined by the separator, or with --html the rewritten
    document.
    """
    settings = config.SETTINGS

    if lang and model_path:
        raise typer.BadParameter("Specify either --lang or --model, not both.")
    if not lang and not model_path:
        lang = settings.DEFAULT_LANG

    threshold = settings.THRESHOLD if threshold is None else threshold

    try:
        if model_path:
            model = load_file(model_path, threshold=threshold)
        else:
            model = load(lang, threshold=threshold, model_dir=settings.MODEL_DIR)  # type: ignore[arg-type]
    except ModelLoadError as e:
        log.error("model_load_failed", source=e.source, reason=e.reason.value, error=str(e))
        typer.echo(f"❌ Failed to load model: {e}", err=True)
        typer.echo(f"Available --lang values: {', '.join(LANGUAGES)}", err=True)
        raise typer.Exit(1) from e

    source = _read_input(text)
    if len(source) > settings.MAX_INPUT_CHARS:
        log.error("input_too_large", chars=len(source), max_chars=settings.MAX_INPUT_CHARS)
        typer.echo(
            f"❌ Input is {len(source)} characters; limit is {settings.MAX_INPUT_CHARS}",
            err=True,
        )
        raise typer.Exit(2)

    parser = Parser(model, threshold)
    if html:
        from ..html import HTMLProcessingParser, HTMLProcessorOptions

        options = HTMLProcessorOptions(builder=settings.HTML_PARSER)
        typer.echo(HTMLProcessingParser(parser, options).translate_html_string(source))
        return

    sep = settings.SEPARATOR if separator is None else separator
    typer.echo(sep.join(parser.parse(source)))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
