import logging
import re
from typing import List, Optional

import httpx

from app.core.config import FETCH_TIMEOUT
from app.models.schemas import KnowledgeEntry

logger = logging.getLogger(__name__)

# Pola untuk mendeteksi link video
VIDEO_LINK_PATTERNS = [
    re.compile(r"aparat\.com", re.IGNORECASE),
    re.compile(r"youtube\.com", re.IGNORECASE),
    re.compile(r"youtu\.be", re.IGNORECASE),
]

QUOTED_FIELD_PATTERN = re.compile(r'"(.*?)"')


class KnowledgeBaseLoadError(Exception):
    """Sumber knowledge base tidak bisa diambil atau dibaca."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


def has_video_link(text: str) -> bool:
    return any(pattern.search(text) for pattern in VIDEO_LINK_PATTERNS)


def parse_knowledge_base(text: str) -> List[KnowledgeEntry]:
    """
    Parse format "question","answer" menjadi daftar entry.

    Baris pertama selalu header. Baris yang tidak berisi tepat dua field
    berkutip dilewati tanpa error.
    """
    entries = []
    skipped = 0
    lines = text.strip().split("\n")

    for line in lines[1:]:
        line = line.strip()
        if not line:
            continue

        parts = QUOTED_FIELD_PATTERN.findall(line)
        if len(parts) != 2:
            skipped += 1
            continue

        question = parts[0].strip()
        answer = parts[1].strip()
        entries.append(KnowledgeEntry(
            id=len(entries),
            question=question,
            answer=answer,
            has_video=has_video_link(answer)
        ))

    if skipped:
        logger.debug(f"Skipped {skipped} malformed lines")
    return entries


def decode_source(data: bytes) -> str:
    # Selalu UTF-8, bukan encoding locale
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise KnowledgeBaseLoadError(f"Knowledge base is not valid UTF-8: {e}") from e


async def fetch_source(source: str, client: Optional[httpx.AsyncClient] = None) -> str:
    """Ambil teks knowledge base dari URL atau file lokal."""
    if source.startswith(("http://", "https://")):
        data = await _fetch_url(source, client)
    else:
        try:
            with open(source, "rb") as f:
                data = f.read()
        except OSError as e:
            raise KnowledgeBaseLoadError(f"Error loading file {source}: {e.strerror or e}") from e

    return decode_source(data)


async def _fetch_url(url: str, client: Optional[httpx.AsyncClient]) -> bytes:
    try:
        if client is not None:
            response = await client.get(url)
        else:
            async with httpx.AsyncClient(timeout=FETCH_TIMEOUT) as own_client:
                response = await own_client.get(url)
    except httpx.HTTPError as e:
        raise KnowledgeBaseLoadError(f"Error loading file: {e}") from e

    if not response.is_success:
        raise KnowledgeBaseLoadError(
            f"Error loading file: {response.status_code} {response.reason_phrase}"
        )
    return response.content
