"""
transcribe-cli - Transcribe a local audio file from the command line.

Runs one audio file through one of two speech-to-text engines (Whisper or
Parakeet) and reports the outcome as a single line of JSON: the text on
stdout, or an error on stderr.
"""

__version__ = "0.1.0"
