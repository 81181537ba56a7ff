# config.py

"""
Configuration file for the URL-aware chat assistant.
Modify these settings to control scraping, caching and the LLM backend.
"""

import os

# 💾 Cache store (Redis)
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
CACHE_TTL_SECONDS = 7 * 24 * 60 * 60   # 7 days
MAX_CACHE_SIZE = 1024000   # bytes of serialized JSON
CACHE_KEY_PREFIX = "scraped:"
CACHE_KEY_URL_LENGTH = 200   # URLs sharing this prefix share a cache entry

# 💬 Conversation history
CONVERSATION_TTL_SECONDS = 7 * 24 * 60 * 60
CONVERSATION_KEY_PREFIX = "conversation:"

# 📄 Extraction
MAX_CONTENT_LENGTH = 40000

# 🌐 Sites that only render their content with client-side JavaScript
DYNAMIC_HOSTS = tuple(
    h.strip().lower()
    for h in os.getenv("DYNAMIC_HOSTS", "linkedin.com").split(",")
    if h.strip()
)

# 🚀 Headless browser
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)
VIEWPORT = {"width": 1280, "height": 800}
NAV_TIMEOUT_MS = 30000
WAIT_UNTIL = "networkidle"   # no network connections for at least 500 ms
HEADLESS = True
CHROMIUM_SANDBOX = os.getenv("CHROMIUM_SANDBOX", "1") not in ("0", "false", "False")

# 🤖 LLM (Groq exposes an OpenAI-compatible endpoint)
GROQ_API_KEY = os.getenv("GROQ_API_KEY")
LLM_BASE_URL = os.getenv("LLM_BASE_URL", "https://api.groq.com/openai/v1")
LLM_MODEL = os.getenv("LLM_MODEL", "llama-3.3-70b-versatile")

# 🪵 Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
