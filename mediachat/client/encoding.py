"""Encode local files as data URIs for inline transport."""
from __future__ import annotations

import asyncio
import base64
import logging
import mimetypes
from pathlib import Path
from typing import Iterable, List, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_FALLBACK_CONTENT_TYPE = "application/octet-stream"


def content_type_for(path: PathLike) -> str:
    content_type, _ = mimetypes.guess_type(str(path))
    return content_type or _FALLBACK_CONTENT_TYPE


def _read_as_data_uri(path: Path) -> str:
    payload = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:{content_type_for(path)};base64,{payload}"


async def file_to_data_uri(path: PathLike) -> str:
    """Read *path* off the event loop and return its bytes as a data URI."""

    data_uri = await asyncio.to_thread(_read_as_data_uri, Path(path))
    logger.debug("Encoded %s (%d chars)", path, len(data_uri))
    return data_uri


async def encode_files(paths: Iterable[PathLike]) -> List[str]:
    """Encode every file concurrently; the first failure fails the whole batch."""

    return list(await asyncio.gather(*(file_to_data_uri(p) for p in paths)))
