from .config import Config, STORAGE_BUCKETS

SECRET_KEY = "test-secret"

SUPABASE_CONFIG = {"url": "", "key": ""}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

CORS_ORIGIN = ""
PORT = Config.PORT

SIGNED_URL_TTL_SECONDS = 600
MAX_AVATAR_BYTES = 5 * 1024 * 1024
