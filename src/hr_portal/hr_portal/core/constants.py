"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

MAX_AVATAR_BYTES = 5 * 1024 * 1024
SIGNED_URL_TTL_SECONDS = 60 * 10
UPLOAD_CACHE_CONTROL = "3600"

PDF_CONTENT_TYPE = "application/pdf"

DEFAULT_BUCKETS = {
    "documents": "employee-documents",
    "avatars": "avatars",
    "logos": "company-logos",
}
