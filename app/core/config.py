import logging
import os

# Konfigurasi service
KNOWLEDGE_BASE_SOURCE = os.getenv("KNOWLEDGE_BASE_SOURCE", "data/knowledge-base.csv")
FEEDBACK_ENABLED = os.getenv("FEEDBACK_ENABLED", "true").lower() in ("1", "true", "yes", "on")
PAGE_SIZE = int(os.getenv("PAGE_SIZE", "3"))
FETCH_TIMEOUT = float(os.getenv("FETCH_TIMEOUT", "10"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "app.log")

# Scoring
RELEVANCE_WEIGHT = 5
PHRASE_BONUS = 2


def setup_logging():
    handlers = [logging.StreamHandler()]
    if LOG_FILE:
        handlers.append(logging.FileHandler(LOG_FILE, encoding="utf-8"))

    logging.basicConfig(
        level=LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )
