"""
Test configuration and shared fixtures.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from transcribe_cli.config import DEFAULT_PARAKEET_MODEL
from transcribe_cli.engines import TranscriptionResult


class FakeEngine:
    """Engine double that records calls and returns canned text."""

    name = "fake"

    def __init__(self) -> None:
        self.text = "hello world"
        self.load_error: Exception | None = None
        self.transcribe_error: Exception | None = None
        self.kind = None
        self.parakeet_model = None
        self.calls: list[tuple] = []

    def load_model(self, model_path, model_params) -> None:
        self.calls.append(("load_model", model_path, model_params))
        if self.load_error:
            raise self.load_error

    def transcribe(self, audio_path, inference_params) -> TranscriptionResult:
        self.calls.append(("transcribe", audio_path, inference_params))
        if self.transcribe_error:
            raise self.transcribe_error
        return TranscriptionResult(text=self.text)


@pytest.fixture
def fake_engine(monkeypatch: pytest.MonkeyPatch) -> FakeEngine:
    """Replace the engine factory used by the pipeline with a FakeEngine."""
    engine = FakeEngine()

    def factory(kind, parakeet_model=DEFAULT_PARAKEET_MODEL):
        engine.kind = kind
        engine.parakeet_model = parakeet_model
        return engine

    monkeypatch.setattr("transcribe_cli.pipeline.create_engine", factory)
    return engine


@pytest.fixture
def model_file(tmp_path: Path) -> Path:
    """Return a placeholder Whisper model file."""
    path = tmp_path / "ggml-base.bin"
    path.write_bytes(b"fake model")
    return path


@pytest.fixture
def model_dir(tmp_path: Path) -> Path:
    """Return a placeholder Parakeet model directory."""
    path = tmp_path / "parakeet-tdt-0.6b-v3-int8"
    path.mkdir()
    (path / "encoder-model.int8.onnx").write_bytes(b"fake encoder")
    return path


@pytest.fixture
def audio_file(tmp_path: Path) -> Path:
    """Return a placeholder WAV file."""
    path = tmp_path / "speech.wav"
    path.write_bytes(b"RIFF fake wav")
    return path
