"""
transcribe_cli.engines.parakeet - Parakeet engine via onnx-asr.

Loads an int8-quantized Parakeet TDT model from a local directory. The model
detects the spoken language itself; inference params carry no language.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from transcribe_cli.config import DEFAULT_PARAKEET_MODEL
from transcribe_cli.engines.base import TranscriptionResult, engine_message
from transcribe_cli.exceptions import EngineLoadError, TranscriptionError
from transcribe_cli.logging import logger
from transcribe_cli.request import InferenceParams, ModelParams, ParakeetModelParams


class ParakeetEngine:
    """Parakeet speech-to-text engine.

    Args:
        model_name: onnx-asr model identifier matching the files in the model directory
    """

    name = "parakeet"

    def __init__(self, model_name: str = DEFAULT_PARAKEET_MODEL) -> None:
        self.model_name = model_name
        self._model: Any = None

    def load_model(self, model_path: Path, model_params: ModelParams) -> None:
        if not isinstance(model_params, ParakeetModelParams):
            raise TypeError(f"Parakeet engine expects ParakeetModelParams, got {model_params!r}")

        try:
            import onnx_asr
        except ImportError as e:
            raise EngineLoadError(
                "onnx-asr not installed. Install with: pip install onnx-asr[cpu]"
            ) from e

        quantization = model_params.quantization.value
        logger.debug(
            f"Loading Parakeet model: {self.model_name} from {model_path} "
            f"(quantization={quantization})"
        )

        try:
            self._model = onnx_asr.load_model(
                self.model_name, str(model_path), quantization=quantization
            )
        except Exception as e:
            raise EngineLoadError(engine_message(e)) from e

    def transcribe(
        self, audio_path: Path, inference_params: InferenceParams
    ) -> TranscriptionResult:
        try:
            text = self._model.recognize(str(audio_path))
        except Exception as e:
            raise TranscriptionError(engine_message(e)) from e

        return TranscriptionResult(text=text)
