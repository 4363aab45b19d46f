from enum import Enum
from pydantic import BaseModel, Field, model_validator
from typing import List, Optional

from app.core.config import PAGE_SIZE

class KnowledgeEntry(BaseModel):
    id: int
    question: str
    answer: str
    has_video: bool = False
    likes: int = Field(default=0, ge=0)
    dislikes: int = Field(default=0, ge=0)

    @property
    def feedback_score(self) -> int:
        return self.likes - self.dislikes

class ScoredCandidate(BaseModel):
    entry: KnowledgeEntry
    relevance_score: int
    feedback_score: int = 0
    final_score: int

class FeedbackKind(str, Enum):
    like = "like"
    dislike = "dislike"

class QueryInput(BaseModel):
    query: str
    page: int = Field(default=0, ge=0)
    page_size: int = Field(default=PAGE_SIZE, ge=1, le=100)

class QueryResponse(BaseModel):
    query: str
    keywords: List[str]
    total: int
    page: int
    page_size: int
    total_pages: int
    results: List[ScoredCandidate]

class FeedbackInput(BaseModel):
    kind: FeedbackKind
    entry_id: Optional[int] = None
    question: Optional[str] = None

    @model_validator(mode="after")
    def check_target(self):
        if self.entry_id is None and self.question is None:
            raise ValueError("Either entry_id or question is required")
        return self

class FeedbackResponse(BaseModel):
    recorded: bool
    entry: Optional[KnowledgeEntry] = None
