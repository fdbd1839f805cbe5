"""Background audio envelope."""

from adreel.core.audio.envelope import AudioEnvelope, audio_volume

__all__ = ["AudioEnvelope", "audio_volume"]
