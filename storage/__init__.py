"""Storage package providing the append-only JSON lines output for samples."""

from .jsonl_writer import append_samples, serialize_samples

__all__ = ["append_samples", "serialize_samples"]
