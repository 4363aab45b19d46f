from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api.endpoints import router
from app.core.config import setup_logging
from app.services.knowledge import KnowledgeService
from app.services.loader import KnowledgeBaseLoadError

setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app):
    # Muat knowledge base sekali saat startup
    service = getattr(app.state, "knowledge", None) or KnowledgeService()
    app.state.knowledge = service
    try:
        await service.load_knowledge_base()
    except KnowledgeBaseLoadError as e:
        # Service tetap jalan, query akan mengembalikan hasil kosong
        logger.error(f"Starting without knowledge base: {e.reason}")
    yield

app = FastAPI(
    title="FAQ Matcher API",
    description="API untuk chatbot FAQ menggunakan pencocokan kata kunci",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include router
app.include_router(router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=5000, reload=True)
