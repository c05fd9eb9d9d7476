# app/config.py
import os
import logging
from typing import Optional
from dotenv import load_dotenv
from langchain_openai import ChatOpenAI

# Load environment variables from .env file in the root directory
load_dotenv()

logger = logging.getLogger("holiday-planner.config")


# --- LLM Configuration (Optional) ---
# A missing key is a valid setup: the chat assistant answers from its rules.
API_KEY = os.getenv("OPENAI_API_KEY") or None

MODEL_NAME = os.getenv("LLM_MODEL_NAME", "gpt-4")
BASE_URL = os.getenv("LLM_BASE_URL", "https://api.openai.com/v1")
TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", 0.7))
MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", 800))


def build_llm(api_key: Optional[str] = API_KEY) -> Optional[ChatOpenAI]:
    """
    Create the chat model used by the assistant.

    Returns None when no API key is configured so callers can take the
    rule-based path instead of failing.
    """
    if not api_key:
        logger.info("OPENAI_API_KEY not set, chat assistant will use rule-based answers")
        return None
    return ChatOpenAI(
        model=MODEL_NAME,
        temperature=TEMPERATURE,
        max_tokens=MAX_TOKENS,
        openai_api_key=api_key,
        base_url=BASE_URL,
    )


# --- Public Holiday Provider ---
HOLIDAY_API_BASE_URL = os.getenv("HOLIDAY_API_BASE_URL", "https://date.nager.at/api/v3")
HOLIDAY_API_TIMEOUT = float(os.getenv("HOLIDAY_API_TIMEOUT", 5))
DEFAULT_COUNTRY = os.getenv("DEFAULT_COUNTRY", "IN")
# One provider request per calendar year, so long periods are refused
HOLIDAY_MAX_YEARS = int(os.getenv("HOLIDAY_MAX_YEARS", 5))


# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = os.getenv("LOG_FORMAT", "json").lower() != "text"


# --- Server Configuration ---
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", 8000))
