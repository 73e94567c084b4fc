"""
Configuration settings for the portfolio CMS API
Values are read from the environment (and a local .env file)
"""
import os
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEBUG = os.getenv('DEBUG', 'False') == 'True'

# Get mode (development or production)
MODE = os.getenv("NODE_ENV", os.getenv("MODE", "development"))

# Developer mode: answer every route with synthetic data, never touch the database
MOCK_DB = os.getenv("MOCK_DB", "false").lower() == "true"


def get_env_var(key: str, default: str = None) -> str:
    """Fetch an environment variable and raise an error if it's missing (unless default is provided)."""
    value = os.getenv(key, default)
    if value is None and default is None:
        raise ValueError(f"Missing environment variable: {key}")
    return value


def is_production() -> bool:
    return MODE == "production"


# Database URL
DATABASE_URL = get_env_var("DATABASE_URL", "sqlite+aiosqlite:///./portfolio.db")

# Connection pool (kept small for managed serverless Postgres)
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "5"))
DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", "30"))
DB_POOL_RECYCLE = int(os.getenv("DB_POOL_RECYCLE", "300"))
DB_CONNECT_TIMEOUT = int(os.getenv("DB_CONNECT_TIMEOUT", "60"))

# Read retry on transient database failures
DB_RETRY_ATTEMPTS = int(os.getenv("DB_RETRY_ATTEMPTS", "3"))
DB_RETRY_DELAY = float(os.getenv("DB_RETRY_DELAY", "1.0"))

# Only meant for local SQLite development; deployed databases are migrated with Alembic
AUTO_CREATE_TABLES = os.getenv("AUTO_CREATE_TABLES", "False") == "True"

# CORS Configuration
CORS_ALLOW_ORIGIN = os.getenv("CORS_ALLOW_ORIGIN", "*")
CORS_ALLOW_METHODS: List[str] = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
CORS_ALLOW_HEADERS: List[str] = ["Content-Type", "Authorization", "x-api-key"]

# Demo login, accepted without a database
DEMO_ADMIN_EMAIL = os.getenv("DEMO_ADMIN_EMAIL", "admin@example.com")
DEMO_ADMIN_PASSWORD = os.getenv("DEMO_ADMIN_PASSWORD", "admin")

# Blog likes: reject a second like from the same client IP when enabled.
# Checked under the post row lock taken by the counter UPDATE (no unique index).
BLOG_LIKE_UNIQUE_PER_IP = os.getenv("BLOG_LIKE_UNIQUE_PER_IP", "False") == "True"

# Upload stub
UPLOAD_PLACEHOLDER_URL = os.getenv("UPLOAD_PLACEHOLDER_URL", "https://placehold.co/600x400")

# AI chat-completion provider (OpenAI-compatible endpoint)
AI_API_KEY = os.getenv("AI_API_KEY", "")
AI_API_URL = os.getenv(
    "AI_API_URL",
    "https://generativelanguage.googleapis.com/v1beta/openai/chat/completions",
)
AI_MODEL = os.getenv("AI_MODEL", "gemini-2.5-flash")
AI_TIMEOUT = float(os.getenv("AI_TIMEOUT", "60"))

# Server
PORT = int(os.getenv("PORT", "3001"))
