"""
transcribe_cli.envelope - JSON result envelope.

A run ends with exactly one envelope: {"text": ...} on success or
{"error": ...} on failure, each serialized as a single compact JSON line.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SuccessEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    text: str

    @property
    def ok(self) -> bool:
        return True


class FailureEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    error: str

    @property
    def ok(self) -> bool:
        return False


Envelope = SuccessEnvelope | FailureEnvelope


def to_json(envelope: Envelope) -> str:
    """Serialize an envelope to one line of JSON.

    Serialization errors propagate; there is no fallback envelope.
    """
    return envelope.model_dump_json()
