"""
transcribe_cli.cli - Typer CLI entry point.

Transcribes one audio file and reports the result as one line of JSON:
{"text": ...} on stdout with exit status 0, or {"error": ...} on stderr with
exit status 1.
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from rich.console import Console

from transcribe_cli import __version__
from transcribe_cli.config import EngineKind, load_config, merge_options
from transcribe_cli.envelope import Envelope, FailureEnvelope, to_json
from transcribe_cli.exceptions import ConfigError
from transcribe_cli.logging import configure_logging
from transcribe_cli.pipeline import run_transcription
from transcribe_cli.request import TranscriptionRequest

app = typer.Typer(
    name="transcribe-cli",
    help="Transcribe audio files using Whisper or Parakeet.\n\n"
    "Prints {\"text\": ...} on success or {\"error\": ...} on stderr on failure.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"transcribe-cli {__version__}")
        raise typer.Exit()


def emit(envelope: Envelope) -> int:
    """Write the envelope to its stream and return the exit status."""
    line = to_json(envelope)
    if envelope.ok:
        typer.echo(line)
        return 0

    typer.echo(line, err=True)
    sys.stderr.flush()
    return 1


@app.command()
def transcribe(
    audio: Path = typer.Option(
        ..., "--audio", help="Path to the WAV audio file (16kHz, 16-bit, mono)"
    ),
    model: Path = typer.Option(
        ...,
        "--model",
        help="Path to the model file (whisper) or model directory (parakeet)",
    ),
    language: str | None = typer.Option(
        None,
        "--language",
        "-l",
        help="Language code, e.g. en, es, fr (auto-detect if not set; ignored by parakeet)",
    ),
    engine: EngineKind | None = typer.Option(
        None, "--engine", "-e", help="Transcription engine (default: whisper)"
    ),
    no_validate: bool = typer.Option(
        False, "--no-validate", help="Skip checking that the model and audio paths exist"
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="YAML file with default options"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", help="Log debug information to stderr"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Transcribe an audio file and print the text as JSON."""
    configure_logging(verbose)

    try:
        config = merge_options(
            load_config(config_path),
            engine=engine,
            language=language,
            validate_paths=False if no_validate else None,
        )
    except ConfigError as e:
        raise typer.Exit(emit(FailureEnvelope(error=str(e))))

    request = TranscriptionRequest(
        audio_path=audio,
        model_path=model,
        engine_kind=config.engine,
        language=config.language,
    )
    envelope = run_transcription(
        request,
        validate=config.validate_paths,
        parakeet_model=config.parakeet_model,
    )
    raise typer.Exit(emit(envelope))
