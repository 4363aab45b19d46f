import logging
import threading
from datetime import datetime
from typing import List, Optional

import httpx

from app.core.config import (
    FEEDBACK_ENABLED,
    KNOWLEDGE_BASE_SOURCE,
    PHRASE_BONUS,
    RELEVANCE_WEIGHT,
)
from app.models.schemas import FeedbackKind, KnowledgeEntry, ScoredCandidate
from app.services.keywords import extract_keywords, keyword_phrase
from app.services.loader import KnowledgeBaseLoadError, fetch_source, parse_knowledge_base

logger = logging.getLogger(__name__)


class KnowledgeService:
    """
    Knowledge base FAQ di memori beserta mesin pencocokan kata kunci.

    Satu instance dibuat saat startup dan dipakai bersama oleh semua request.
    Counter feedback hanya diubah lewat method di kelas ini.
    """

    def __init__(self, source: str = KNOWLEDGE_BASE_SOURCE, feedback_enabled: bool = FEEDBACK_ENABLED,
                 client: Optional[httpx.AsyncClient] = None):
        self.source = source
        self.feedback_enabled = feedback_enabled
        self.client = client
        self.entries: List[KnowledgeEntry] = []
        self.is_ready = False
        self.last_loaded = None
        self.last_error = None
        self._lock = threading.Lock()

    @property
    def count(self) -> int:
        return len(self.entries)

    async def load_knowledge_base(self) -> int:
        """
        Muat ulang seluruh knowledge base dari sumber.

        Jika gagal, knowledge base dikosongkan dan KnowledgeBaseLoadError
        diteruskan ke pemanggil. Tidak ada retry.
        """
        logger.info(f"Loading knowledge base from {self.source}")
        try:
            text = await fetch_source(self.source, self.client)
        except KnowledgeBaseLoadError as e:
            with self._lock:
                self.entries = []
                self.is_ready = False
                self.last_error = e.reason
            logger.error(f"Error loading knowledge base: {e.reason}")
            raise

        entries = parse_knowledge_base(text)
        with self._lock:
            self.entries = entries
            self.is_ready = True
            self.last_loaded = datetime.now().isoformat()
            self.last_error = None

        logger.info(f"Loaded knowledge base with {len(entries)} entries")
        return len(entries)

    def rank(self, query: str) -> List[ScoredCandidate]:
        query_keywords = extract_keywords(query)
        if not query_keywords:
            return []

        query_set = set(query_keywords)
        phrase = keyword_phrase(query_keywords)
        candidates = []

        with self._lock:
            for entry in self.entries:
                entry_keywords = set(extract_keywords(entry.question))
                relevance_score = len(query_set & entry_keywords)

                # Bonus untuk kecocokan frasa
                if phrase in entry.question:
                    relevance_score += PHRASE_BONUS

                if relevance_score == 0:
                    continue

                feedback_score = entry.feedback_score
                if self.feedback_enabled:
                    final_score = relevance_score * RELEVANCE_WEIGHT + feedback_score
                else:
                    final_score = relevance_score

                candidates.append(ScoredCandidate(
                    entry=entry.model_copy(),
                    relevance_score=relevance_score,
                    feedback_score=feedback_score,
                    final_score=final_score
                ))

        # sort() stabil, jadi urutan load dipertahankan untuk nilai yang sama
        if self.feedback_enabled:
            candidates.sort(key=lambda c: (c.final_score, c.relevance_score, c.feedback_score, c.entry.likes),
                            reverse=True)
        else:
            candidates.sort(key=lambda c: c.final_score, reverse=True)

        logger.debug(f"Query matched {len(candidates)} of {len(self.entries)} entries")
        return candidates

    def find_matches(self, query: str) -> List[KnowledgeEntry]:
        return [candidate.entry for candidate in self.rank(query)]

    def get_entry(self, entry_id: int) -> Optional[KnowledgeEntry]:
        with self._lock:
            if 0 <= entry_id < len(self.entries):
                return self.entries[entry_id].model_copy()
        return None

    def list_entries(self, skip: int = 0, limit: int = 100) -> List[KnowledgeEntry]:
        with self._lock:
            return [entry.model_copy() for entry in self.entries[skip:skip + limit]]

    def find_entry_id(self, question: str) -> Optional[int]:
        with self._lock:
            for entry in self.entries:
                if entry.question == question:
                    return entry.id
        return None

    def record_feedback(self, entry_id: int, kind: FeedbackKind) -> Optional[KnowledgeEntry]:
        """Tambah like/dislike untuk entry dengan ID tertentu. ID tidak dikenal diabaikan."""
        with self._lock:
            if not 0 <= entry_id < len(self.entries):
                return None

            entry = self.entries[entry_id]
            if kind == FeedbackKind.like:
                entry.likes += 1
            else:
                entry.dislikes += 1
            snapshot = entry.model_copy()

        logger.info(f"Recorded {kind.value} for entry {entry_id}")
        return snapshot

    def like_entry(self, question: str) -> Optional[KnowledgeEntry]:
        entry_id = self.find_entry_id(question)
        if entry_id is None:
            return None
        return self.record_feedback(entry_id, FeedbackKind.like)

    def dislike_entry(self, question: str) -> Optional[KnowledgeEntry]:
        entry_id = self.find_entry_id(question)
        if entry_id is None:
            return None
        return self.record_feedback(entry_id, FeedbackKind.dislike)
