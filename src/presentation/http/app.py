"""
Flask-based HTTP entry point for the archive search service.

Provides /api/search, /api/stats, /api/user/<id>, /api/users and /health.
"""

from typing import Optional

from flask import Flask, g, jsonify, request

from ...domain.users import UserDomainService
from ...shared.logging import LogLevel, configure_logging, get_logger
from ..containers import ServiceContainer
from .error_handlers import register_error_handlers

logger = get_logger(__name__)

_BOT_PREFIX = "Bot "
_MAX_BATCH_IDS = 100


def _bot_token_from_header(header: Optional[str]) -> Optional[str]:
    """Strip the ``Bot`` scheme from an Authorization header value."""
    if not header:
        return None
    token = header[len(_BOT_PREFIX):] if header.startswith(_BOT_PREFIX) else header
    return token.strip() or None


def create_app(container: Optional[ServiceContainer] = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        container: Service container; built from configuration if omitted

    Returns:
        Flask: Configured application
    """
    if container is None:
        container = ServiceContainer.from_config_manager()
        container.prepare_backend()

    app = Flask(__name__)
    app.extensions["archive_search"] = container
    register_error_handlers(app)

    # ----- CORS -----
    @app.after_request
    def _add_cors_headers(response):
        response.headers["Access-Control-Allow-Origin"] = container.config.get_cors_origins()
        response.headers["Access-Control-Allow-Headers"] = "Content-Type, Authorization"
        response.headers["Access-Control-Allow-Methods"] = "GET, OPTIONS"
        return response

    @app.before_request
    def _start_request():
        g.request_params = request.args.to_dict()

    @app.route("/health", methods=["GET"])
    def health():
        """Health check endpoint."""
        if container.check_health():
            return jsonify({"status": "healthy"}), 200
        return jsonify({"status": "unhealthy"}), 503

    @app.route("/api/search", methods=["GET"])
    def search_endpoint():
        """Search messages by content phrase and/or author, channel and guild ids."""
        logger.info("Search request", params=g.request_params)
        result = container.search_handler.handle_search(g.request_params)
        return jsonify(result.to_dict())

    @app.route("/api/stats", methods=["GET"])
    def stats_endpoint():
        """Corpus statistics."""
        statistics = container.statistics_service.get_statistics()
        return jsonify(statistics.to_dict())

    @app.route("/api/user/<user_id>", methods=["GET"])
    def user_endpoint(user_id: str):
        """Resolve one author; never fails for directory errors."""
        if not UserDomainService.is_snowflake(user_id):
            return jsonify({"error": "User not found"}), 404
        try:
            bot_token = _bot_token_from_header(request.headers.get("Authorization"))
            user = container.enrichment_service.resolve_user(user_id, bot_token=bot_token)
        except Exception as e:
            logger.exception("User lookup crashed", exc_info=e, user_id=user_id)
            return jsonify({"error": "Failed to fetch user", "details": str(e)}), 500
        return jsonify(user.to_dict())

    @app.route("/api/users", methods=["GET"])
    def users_endpoint():
        """Resolve a comma-separated batch of authors."""
        raw_ids = request.args.get("ids", "")
        user_ids = [uid.strip() for uid in raw_ids.split(",") if uid.strip()]
        if not user_ids:
            return jsonify({"error": "Missing 'ids' parameter"}), 400
        if len(user_ids) > _MAX_BATCH_IDS:
            return jsonify({"error": f"At most {_MAX_BATCH_IDS} ids per request"}), 400
        invalid = [uid for uid in user_ids if not UserDomainService.is_snowflake(uid)]
        if invalid:
            return jsonify({"error": "Invalid user ids", "details": ", ".join(invalid)}), 400

        users = container.enrichment_service.resolve_users(user_ids)
        return jsonify({"users": [user.to_dict() for user in users.values()]})

    return app


def main() -> None:
    """Entry point for the search service."""
    container = ServiceContainer.from_config_manager()
    config = container.config
    configure_logging(
        level=LogLevel.from_name(config.get_log_level()),
        log_file=config.get_log_file()
    )
    container.prepare_backend()
    app = create_app(container)
    logger.info(
        "Starting archive search service",
        host=config.get_server_host(),
        port=config.get_server_port()
    )
    try:
        app.run(host=config.get_server_host(), port=config.get_server_port())
    finally:
        container.close()


if __name__ == "__main__":
    main()
