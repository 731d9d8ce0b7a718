"""
transcribe_cli.validation - Input file checks.

Checks that the model and audio paths exist before an engine is loaded, so
the most common mistake gets a precise message instead of an engine error.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from transcribe_cli.exceptions import ValidationError
from transcribe_cli.request import TranscriptionRequest


def required_paths(request: TranscriptionRequest) -> list[tuple[str, Path]]:
    """Return the (label, path) pairs to check, model first."""
    return [
        ("Model", request.model_path),
        ("Audio", request.audio_path),
    ]


def validate_paths(pairs: Iterable[tuple[str, Path]]) -> None:
    """Check that each path exists, in order.

    Args:
        pairs: (label, path) pairs; the label starts the error message

    Raises:
        ValidationError: On the first missing path. Later paths are not checked.
    """
    for label, path in pairs:
        if not path.exists():
            raise ValidationError(f"{label} file not found: {path}")
