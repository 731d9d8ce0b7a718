"""
transcribe_cli.exceptions - Custom exception classes.

All transcribe-cli exceptions inherit from TranscribeCliError. Anything that
inherits from it is reported to the caller as an error envelope.
"""


class TranscribeCliError(Exception):
    """Base exception for all transcribe-cli errors."""

    pass


class ConfigError(TranscribeCliError):
    """Configuration loading or validation error."""

    pass


class ValidationError(TranscribeCliError):
    """Required input file is missing."""

    pass


class EngineError(TranscribeCliError):
    """Opaque failure raised by a transcription engine.

    Carries only the engine's display message.
    """

    pass


class EngineLoadError(EngineError):
    """Model could not be loaded (missing package, invalid or corrupt model)."""

    pass


class TranscriptionError(EngineError):
    """Inference failed on the given audio."""

    pass
