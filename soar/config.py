import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

# ---- Model provider ----
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "anthropic")  # anthropic | vertex | chat_completions

ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY", "")
ANTHROPIC_BASE_URL = os.getenv("ANTHROPIC_BASE_URL", "https://api.anthropic.com")
ANTHROPIC_MODEL = os.getenv("ANTHROPIC_MODEL", "claude-sonnet-4-20250514")
ANTHROPIC_MAX_TOKENS = int(os.getenv("ANTHROPIC_MAX_TOKENS", "8192"))

# Claude on Vertex AI, authenticated with Application Default Credentials
GOOGLE_CLOUD_PROJECT = os.getenv("GOOGLE_CLOUD_PROJECT", "")
GOOGLE_CLOUD_REGION = os.getenv("GOOGLE_CLOUD_REGION", "us-east5")
VERTEX_MODEL = os.getenv("VERTEX_MODEL", "claude-sonnet-4@20250514")

# Any OpenAI-compatible /chat/completions endpoint
LLM_BASE_URL = os.getenv("LLM_BASE_URL", "http://localhost:8001/v1")
LLM_MODEL = os.getenv("LLM_MODEL", "mistral-7b-instruct")
LLM_API_KEY = os.getenv("LLM_API_KEY", "")

LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "300"))

# ---- Codebase walk limits ----
ANALYSIS_MAX_FILES = int(os.getenv("ANALYSIS_MAX_FILES", "500"))
ANALYSIS_MAX_FILE_SIZE = int(os.getenv("ANALYSIS_MAX_FILE_SIZE", "50000"))

# ---- API ----
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

# ---- Logging ----
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "console")  # console | json
