import os

from .config import Config, STORAGE_BUCKETS, SUPABASE_CONFIG

SECRET_KEY = Config.SECRET_KEY

DEBUG = bool(int(os.getenv("DEBUG", "1")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

CORS_ORIGIN = Config.CORS_ORIGIN or "http://localhost:3000"
PORT = Config.PORT

SIGNED_URL_TTL_SECONDS = Config.SIGNED_URL_TTL_SECONDS
MAX_AVATAR_BYTES = Config.MAX_AVATAR_BYTES
