from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, request

from config import get_settings_module

from .container import Container, build_container
from .companies.controller import register as register_companies
from .documents.controller import register as register_documents
from .employees.controller import register as register_employees
from .health.controller import register as register_health

logger = logging.getLogger(__name__)


def _register_cors(app: Flask, origin: str) -> None:
    @app.after_request
    def cors_headers(response):
        if origin:
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Access-Control-Allow-Methods"] = "GET, POST, PATCH, OPTIONS"
            response.headers["Access-Control-Allow-Headers"] = "Content-Type, Authorization"
            if request.method == "OPTIONS":
                response.status_code = 204
        return response


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if container is None:
        supabase_config = getattr(settings, "SUPABASE_CONFIG")
        container = build_container(
            supabase_config=supabase_config,
            buckets=getattr(settings, "STORAGE_BUCKETS", None),
            signed_url_ttl=int(getattr(settings, "SIGNED_URL_TTL_SECONDS", 600)),
            max_avatar_bytes=int(getattr(settings, "MAX_AVATAR_BYTES", 5 * 1024 * 1024)),
        )
        logger.info(
            "[hr-portal] settings=%s supabase=%s",
            settings_module,
            supabase_config.get("url") or "<not configured>",
        )

    _register_cors(app, str(getattr(settings, "CORS_ORIGIN", "") or ""))

    register_health(app, container)
    register_companies(app, container)
    register_employees(app, container)
    register_documents(app, container)

    @app.errorhandler(404)
    def not_found(_e):
        return jsonify({"message": "Not Found"}), 404

    return app
