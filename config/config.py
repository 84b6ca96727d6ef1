import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key"

    # Hosted database + storage (Supabase). Use the service-role key server side.
    SUPABASE_URL = os.environ.get("SUPABASE_URL", "")
    SUPABASE_KEY = os.environ.get("SUPABASE_SERVICE_ROLE_KEY", os.environ.get("SUPABASE_KEY", ""))

    DOCUMENTS_BUCKET = os.environ.get("DOCUMENTS_BUCKET", "employee-documents")
    AVATARS_BUCKET = os.environ.get("AVATARS_BUCKET", "avatars")
    LOGOS_BUCKET = os.environ.get("LOGOS_BUCKET", "company-logos")

    SIGNED_URL_TTL_SECONDS = int(os.environ.get("SIGNED_URL_TTL_SECONDS", "600"))
    MAX_AVATAR_BYTES = int(os.environ.get("MAX_AVATAR_BYTES", str(5 * 1024 * 1024)))

    CORS_ORIGIN = os.environ.get("CORS_ORIGIN", "")
    PORT = int(os.environ.get("PORT", "4000"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


SUPABASE_CONFIG = {
    "url": Config.SUPABASE_URL,
    "key": Config.SUPABASE_KEY,
}

STORAGE_BUCKETS = {
    "documents": Config.DOCUMENTS_BUCKET,
    "avatars": Config.AVATARS_BUCKET,
    "logos": Config.LOGOS_BUCKET,
}
