"""Shared utilities for all services."""

import asyncio
import mimetypes
import random
import time
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..errors import TransportError

mimetypes.add_type(
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document", ".docx"
)


@dataclass(frozen=True)
class UploadedFile:
    """A document handed to the résumé upload contract."""

    filename: str
    content_type: str
    size: int
    content: bytes = b""

    @classmethod
    def from_path(cls, path: Path) -> "UploadedFile":
        """Read a file from disk, guessing its media type from the extension."""
        path = Path(path)
        content = path.read_bytes()
        content_type, _ = mimetypes.guess_type(path.name)
        return cls(
            filename=path.name,
            content_type=content_type or "application/octet-stream",
            size=len(content),
            content=content,
        )


async def simulate_latency(low: float, high: float, scale: float) -> None:
    """Sleep for a random duration in [low, high) seconds, times scale."""
    if scale <= 0:
        return
    await asyncio.sleep((low + random.random() * (high - low)) * scale)


def elapsed_since(started: float) -> float:
    """Seconds since a time.perf_counter() mark, rounded for display."""
    return round(time.perf_counter() - started, 1)


def require_data(response: Any, kind: type) -> Any:
    """Return response["data"] when it has the expected type.

    Raises:
        TransportError: The server answered without a usable "data" field.
    """
    data = response.get("data") if isinstance(response, dict) else None
    if not isinstance(data, kind):
        raise TransportError("Malformed response from server")
    return data


def new_record_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"
