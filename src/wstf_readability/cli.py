from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import typer
import yaml

from .config import ReadabilityConfig, load_config
from .engine import ReadabilityEngine, build_engine
from .errors import InvalidRequest, ReadabilityError
from .formulas import interpret_score
from .languages import supported_languages
from .service import handle_request

app = typer.Typer(help="Wiener Sachtextformel readability CLI.", no_args_is_help=True)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    """Configure logging for every sub-command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.command()
def score(
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    text: str | None = typer.Option(None, "--text", "-t", help="Text to score."),
    variant: str | None = typer.Option(
        None, "--variant", help="Formula variant (WSTF1-WSTF4); defaults to config."
    ),
    language: str | None = typer.Option(
        None, "--language", "-l", help="Language profile to load (e.g. 'de')."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    all_variants: bool = typer.Option(
        False, "--all-variants", help="Also report the score of every variant."
    ),
) -> None:
    """Score a text file or string and emit a JSON result."""
    if (input_path is None) == (text is None):
        raise typer.BadParameter("Provide exactly one of --input-path or --text.")
    source = input_path.read_text(encoding="utf-8") if input_path else text or ""
    cfg = _read_config(config)
    engine = _load_engine(cfg, language)
    try:
        result = engine.evaluate(source, variant or cfg.default_variant)
        payload = result.to_dict()
        payload["language"] = engine.language
        payload["grade"] = interpret_score(result.score)
        if all_variants:
            payload["scores"] = {
                key.value: value for key, value in engine.evaluate_all(source).items()
            }
    except ReadabilityError as exc:
        typer.echo(f"{type(exc).__name__}: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(json.dumps(payload, indent=2))


@app.command("handle-request")
def handle_request_command(
    request_path: Path | None = typer.Option(
        None,
        exists=True,
        readable=True,
        dir_okay=False,
        help="JSON request file; reads stdin when omitted.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Answer a JSON readability request the way the service endpoint does."""
    raw = request_path.read_text(encoding="utf-8") if request_path else sys.stdin.read()
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"unable to parse request: {exc}") from exc
    engine = _load_engine(_read_config(config), None)
    try:
        response = handle_request(engine, payload)
    except InvalidRequest as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(json.dumps(response, indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ReadabilityConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


@app.command()
def languages() -> None:
    """List the supported language codes."""
    for code in supported_languages():
        typer.echo(code)


def main() -> None:
    app()


def _read_config(path: Path | None) -> ReadabilityConfig:
    try:
        return load_config(path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(f"unable to load config: {exc}") from exc


def _load_engine(config: ReadabilityConfig, language: str | None) -> ReadabilityEngine:
    """Build the engine once per invocation; resource failures end the command."""
    try:
        return build_engine(config, language)
    except ReadabilityError as exc:
        typer.echo(f"Cannot create readability engine: {exc}", err=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    main()
