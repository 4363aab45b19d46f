from fastapi import APIRouter, HTTPException, Depends, Request
from app.models.schemas import (
    FeedbackInput,
    FeedbackResponse,
    KnowledgeEntry,
    QueryInput,
    QueryResponse,
)
from app.services.keywords import extract_keywords
from app.services.knowledge import KnowledgeService
from app.services.loader import KnowledgeBaseLoadError
from typing import List
import logging
import math

logger = logging.getLogger(__name__)

router = APIRouter()

# Dependency to get the service created at startup
def get_knowledge_service(request: Request) -> KnowledgeService:
    return request.app.state.knowledge



# MAIN API ROUTE
@router.get("/")
def read_root():
    return {"message": "FAQ Matcher API is running"}

@router.get("/status")
def get_status(service: KnowledgeService = Depends(get_knowledge_service)):
    return {
        "status": "online" if service.is_ready else "unavailable",
        "ready": service.is_ready,
        "entries_count": service.count,
        "feedback_enabled": service.feedback_enabled,
        "source": service.source,
        "last_loaded": service.last_loaded,
        "last_error": service.last_error
    }

@router.post("/query", response_model=QueryResponse)
def query(input_data: QueryInput, service: KnowledgeService = Depends(get_knowledge_service)):
    # Knowledge base belum siap dianggap sama dengan tidak ada jawaban
    candidates = service.rank(input_data.query) if service.is_ready else []

    total = len(candidates)
    start = input_data.page * input_data.page_size
    page_results = candidates[start:start + input_data.page_size]

    return QueryResponse(
        query=input_data.query,
        keywords=extract_keywords(input_data.query),
        total=total,
        page=input_data.page,
        page_size=input_data.page_size,
        total_pages=math.ceil(total / input_data.page_size),
        results=page_results
    )

@router.get("/entries", response_model=List[KnowledgeEntry])
def list_entries(
    skip: int = 0,
    limit: int = 100,
    service: KnowledgeService = Depends(get_knowledge_service)
):
    """
    Daftar entry knowledge base sesuai urutan load
    """
    return service.list_entries(skip=skip, limit=limit)

@router.get("/entries/{entry_id}", response_model=KnowledgeEntry)
def get_entry(entry_id: int, service: KnowledgeService = Depends(get_knowledge_service)):
    entry = service.get_entry(entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"Entry with ID {entry_id} not found")
    return entry

@router.post("/feedback", response_model=FeedbackResponse)
def record_feedback(feedback: FeedbackInput, service: KnowledgeService = Depends(get_knowledge_service)):
    """
    Mencatat like/dislike. Target yang tidak ditemukan tidak dianggap error.
    """
    entry_id = feedback.entry_id
    if entry_id is None:
        entry_id = service.find_entry_id(feedback.question)

    entry = service.record_feedback(entry_id, feedback.kind) if entry_id is not None else None
    if entry is None:
        logger.info(f"Ignored {feedback.kind.value} for unknown entry")

    return FeedbackResponse(recorded=entry is not None, entry=entry)

@router.post("/reload")
async def reload_knowledge_base(service: KnowledgeService = Depends(get_knowledge_service)):
    """
    Memuat ulang knowledge base dari sumber. Counter feedback ikut direset.
    """
    try:
        count = await service.load_knowledge_base()
    except KnowledgeBaseLoadError as e:
        raise HTTPException(status_code=503, detail=f"Failed to load knowledge base: {e.reason}")

    return {
        "message": "Knowledge base reloaded successfully",
        "entries_count": count,
        "last_loaded": service.last_loaded
    }
