"""
transcribe_cli.request - Transcription request and engine parameters.

Builds the model-load and inference parameters each engine expects from a
single immutable TranscriptionRequest.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from transcribe_cli.config import EngineKind
from transcribe_cli.logging import logger


class Quantization(str, Enum):
    """Weight quantization for the Parakeet engine."""

    INT8 = "int8"


class TranscriptionRequest(BaseModel):
    """One invocation's input, fixed once parsed from the command line."""

    model_config = ConfigDict(frozen=True)

    audio_path: Path
    model_path: Path
    engine_kind: EngineKind = EngineKind.WHISPER
    language: str | None = None


class WhisperModelParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    use_gpu: bool = True


class ParakeetModelParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    quantization: Quantization = Quantization.INT8


class InferenceParams(BaseModel):
    """Inference options. A language of None lets the engine auto-detect."""

    model_config = ConfigDict(frozen=True)

    language: str | None = None


ModelParams = WhisperModelParams | ParakeetModelParams


def build_params(request: TranscriptionRequest) -> tuple[ModelParams, InferenceParams]:
    """Assemble model and inference parameters for the request's engine.

    Whisper always loads with GPU enabled and passes the language through
    unchanged. Parakeet always loads int8 weights and always auto-detects the
    language: a --language value is accepted but never reaches inference.

    Args:
        request: The parsed transcription request

    Returns:
        Tuple of (model params, inference params) matching the engine kind
    """
    if request.engine_kind == EngineKind.WHISPER:
        return WhisperModelParams(use_gpu=True), InferenceParams(language=request.language)

    if request.engine_kind == EngineKind.PARAKEET:
        if request.language is not None:
            logger.debug(
                "Parakeet engine auto-detects language; ignoring --language %s",
                request.language,
            )
        return ParakeetModelParams(quantization=Quantization.INT8), InferenceParams()

    raise ValueError(f"Unknown engine: {request.engine_kind}")
