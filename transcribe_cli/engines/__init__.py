"""
transcribe_cli.engines - Speech-to-text engine adapters.

Two engines share the EngineAdapter interface: Whisper (model file) and
Parakeet (int8 model directory).
"""

from __future__ import annotations

from transcribe_cli.config import DEFAULT_PARAKEET_MODEL, EngineKind
from transcribe_cli.engines.base import EngineAdapter, TranscriptionResult
from transcribe_cli.engines.parakeet import ParakeetEngine
from transcribe_cli.engines.whisper import WhisperEngine

__all__ = [
    "EngineAdapter",
    "ParakeetEngine",
    "TranscriptionResult",
    "WhisperEngine",
    "create_engine",
]


def create_engine(
    kind: EngineKind, parakeet_model: str = DEFAULT_PARAKEET_MODEL
) -> EngineAdapter:
    """Create a fresh, unloaded engine for the given kind.

    Raises:
        ValueError: If the kind is unknown
    """
    if kind == EngineKind.WHISPER:
        return WhisperEngine()
    elif kind == EngineKind.PARAKEET:
        return ParakeetEngine(model_name=parakeet_model)
    raise ValueError(f"Unknown engine: {kind}")
