"""Environment-driven settings, read once at import time."""

import os

from dotenv import load_dotenv

load_dotenv()  # load .env before anything reads os.getenv()

DATABASE_URL = os.getenv("DATABASE_URL", "")
DB_POOL_MIN_SIZE = int(os.getenv("DB_POOL_MIN_SIZE", "1"))
DB_POOL_MAX_SIZE = int(os.getenv("DB_POOL_MAX_SIZE", "10"))

SUPABASE_URL = os.getenv("SUPABASE_URL", "").rstrip("/")
SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY", "")
SUPABASE_JWT_SECRET = os.getenv("SUPABASE_JWT_SECRET", "")
SUPABASE_JWT_AUD = os.getenv("SUPABASE_JWT_AUD", "authenticated")

STORAGE_TIMEOUT = float(os.getenv("STORAGE_TIMEOUT", "15"))  # seconds

# Max age of the in-memory strategy catalog before the next read re-fetches it
STRATEGY_CATALOG_TTL = float(os.getenv("STRATEGY_CATALOG_TTL", "60"))  # seconds
