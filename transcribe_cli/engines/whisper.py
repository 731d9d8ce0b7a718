"""
transcribe_cli.engines.whisper - Whisper engine via whisper.cpp.

Loads a GGML Whisper model file with pywhispercpp and transcribes a 16kHz
WAV file, joining the segment texts into one string.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from transcribe_cli.engines.base import TranscriptionResult, engine_message
from transcribe_cli.exceptions import EngineLoadError, TranscriptionError
from transcribe_cli.logging import logger
from transcribe_cli.request import InferenceParams, ModelParams, WhisperModelParams


class WhisperEngine:
    """Whisper speech-to-text engine."""

    name = "whisper"

    def __init__(self) -> None:
        self._model: Any = None

    def load_model(self, model_path: Path, model_params: ModelParams) -> None:
        if not isinstance(model_params, WhisperModelParams):
            raise TypeError(f"Whisper engine expects WhisperModelParams, got {model_params!r}")

        try:
            from pywhispercpp.model import Model
        except ImportError as e:
            raise EngineLoadError(
                "pywhispercpp not installed. Install with: pip install pywhispercpp"
            ) from e

        # whisper.cpp picks its GPU backend at build time and uses it by default
        if not model_params.use_gpu:
            logger.debug("GPU selection follows the pywhispercpp build; use_gpu=False ignored")
        logger.debug(f"Loading Whisper model: {model_path}")

        try:
            self._model = Model(
                str(model_path),
                redirect_whispercpp_logs_to=None,
                print_progress=False,
                print_realtime=False,
            )
        except Exception as e:
            raise EngineLoadError(engine_message(e)) from e

    def transcribe(
        self, audio_path: Path, inference_params: InferenceParams
    ) -> TranscriptionResult:
        kwargs: dict[str, Any] = {}
        if inference_params.language is not None:
            kwargs["language"] = inference_params.language

        try:
            segments = self._model.transcribe(str(audio_path), **kwargs)
        except Exception as e:
            raise TranscriptionError(engine_message(e)) from e

        text = "".join(segment.text for segment in segments)
        logger.debug(f"Whisper transcription done ({len(segments)} segments)")
        return TranscriptionResult(text=text)
