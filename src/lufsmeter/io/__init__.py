from .audio_file import read_audio, write_audio

__all__ = ["read_audio", "write_audio"]
