import os

from .config import Config, STORAGE_BUCKETS, SUPABASE_CONFIG

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

CORS_ORIGIN = Config.CORS_ORIGIN
PORT = Config.PORT

SIGNED_URL_TTL_SECONDS = Config.SIGNED_URL_TTL_SECONDS
MAX_AVATAR_BYTES = Config.MAX_AVATAR_BYTES
