"""Tests for transcribe_cli.request module."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from transcribe_cli.config import EngineKind
from transcribe_cli.request import (
    InferenceParams,
    ParakeetModelParams,
    Quantization,
    TranscriptionRequest,
    WhisperModelParams,
    build_params,
)


def make_request(engine: EngineKind, language: str | None = None) -> TranscriptionRequest:
    return TranscriptionRequest(
        audio_path=Path("speech.wav"),
        model_path=Path("model.bin"),
        engine_kind=engine,
        language=language,
    )


class TestTranscriptionRequest:
    def test_defaults(self) -> None:
        request = TranscriptionRequest(audio_path=Path("a.wav"), model_path=Path("m.bin"))
        assert request.engine_kind == EngineKind.WHISPER
        assert request.language is None

    def test_is_immutable(self) -> None:
        request = make_request(EngineKind.WHISPER)
        with pytest.raises(ValidationError):
            request.language = "en"


class TestBuildParamsWhisper:
    def test_gpu_always_enabled(self) -> None:
        model_params, _ = build_params(make_request(EngineKind.WHISPER))
        assert model_params == WhisperModelParams(use_gpu=True)

    def test_language_defaults_to_auto_detect(self) -> None:
        _, inference_params = build_params(make_request(EngineKind.WHISPER))
        assert inference_params.language is None

    def test_language_copied_verbatim(self) -> None:
        _, inference_params = build_params(make_request(EngineKind.WHISPER, "es"))
        assert inference_params == InferenceParams(language="es")

    def test_language_not_validated(self) -> None:
        _, inference_params = build_params(make_request(EngineKind.WHISPER, "not-a-language"))
        assert inference_params.language == "not-a-language"


class TestBuildParamsParakeet:
    def test_int8_quantization(self) -> None:
        model_params, _ = build_params(make_request(EngineKind.PARAKEET))
        assert model_params == ParakeetModelParams(quantization=Quantization.INT8)

    @pytest.mark.parametrize("language", [None, "en", "fr", "xx"])
    def test_language_is_ignored(self, language: str | None) -> None:
        _, inference_params = build_params(make_request(EngineKind.PARAKEET, language))
        assert inference_params == InferenceParams()
