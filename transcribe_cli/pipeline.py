"""
transcribe_cli.pipeline - The transcription run.

Sequences path validation, parameter assembly, model loading and
transcription, then wraps the outcome in a result envelope. The first
failure at any stage ends the run.
"""

from __future__ import annotations

from transcribe_cli.config import DEFAULT_PARAKEET_MODEL
from transcribe_cli.engines import TranscriptionResult, create_engine
from transcribe_cli.envelope import Envelope, FailureEnvelope, SuccessEnvelope
from transcribe_cli.exceptions import TranscribeCliError
from transcribe_cli.logging import logger
from transcribe_cli.request import TranscriptionRequest, build_params
from transcribe_cli.validation import required_paths, validate_paths


def transcribe_file(
    request: TranscriptionRequest,
    validate: bool = True,
    parakeet_model: str = DEFAULT_PARAKEET_MODEL,
) -> TranscriptionResult:
    """Transcribe the request's audio file.

    Args:
        request: What to transcribe and with which engine
        validate: Check that the model and audio paths exist first
        parakeet_model: onnx-asr model name used by the Parakeet engine

    Returns:
        TranscriptionResult with the transcribed text

    Raises:
        ValidationError: If validating and an input file is missing
        EngineLoadError: If the model cannot be loaded
        TranscriptionError: If inference fails
    """
    if validate:
        validate_paths(required_paths(request))

    model_params, inference_params = build_params(request)

    engine = create_engine(request.engine_kind, parakeet_model=parakeet_model)
    logger.debug(f"Using {engine.name} engine")

    engine.load_model(request.model_path, model_params)
    result = engine.transcribe(request.audio_path, inference_params)

    logger.debug(f"Transcribed {request.audio_path} ({len(result.text)} characters)")
    return result


def run_transcription(
    request: TranscriptionRequest,
    validate: bool = True,
    parakeet_model: str = DEFAULT_PARAKEET_MODEL,
) -> Envelope:
    """Run one transcription and return its envelope.

    Known failures become a FailureEnvelope carrying the error message.
    Anything else is a bug and propagates.
    """
    try:
        result = transcribe_file(request, validate=validate, parakeet_model=parakeet_model)
    except TranscribeCliError as e:
        logger.debug(f"Transcription run failed: {e!r}")
        return FailureEnvelope(error=str(e))

    return SuccessEnvelope(text=result.text)
