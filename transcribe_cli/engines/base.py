"""
transcribe_cli.engines.base - Engine capability surface.

Every engine loads a model once and then transcribes audio files. Load must
succeed before transcribe is called; the pipeline guarantees that order.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from pydantic import BaseModel

from transcribe_cli.request import InferenceParams, ModelParams


class TranscriptionResult(BaseModel):
    text: str


class EngineAdapter(Protocol):
    """Load-then-transcribe interface shared by all engines."""

    name: str

    def load_model(self, model_path: Path, model_params: ModelParams) -> None:
        """Load the model.

        Raises:
            EngineLoadError: If the engine package is missing or the model is invalid
        """
        ...

    def transcribe(
        self, audio_path: Path, inference_params: InferenceParams
    ) -> TranscriptionResult:
        """Transcribe one audio file with the loaded model.

        Raises:
            TranscriptionError: If inference fails
        """
        ...


def engine_message(exc: BaseException) -> str:
    """Display form of an engine exception, never empty."""
    return str(exc) or exc.__class__.__name__
