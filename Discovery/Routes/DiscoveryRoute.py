"""
Flask REST API for celebrity discovery

This module provides the REST surface the web UI talks to: free-text
celebrity discovery backed by the AI provider, and turning an accepted
suggestion into a profile draft.

Endpoints:
    POST /api/ai/discover-celebrity - Discover celebrities from a description
    POST /api/ai/profile-draft      - Build a profile draft from a suggestion
    GET  /api/health-check          - Health check
"""

from flask import Flask, request, jsonify
from flask_cors import CORS

from Discovery.Utility.env import load_env_file
from Discovery.Business.DiscoveryBusiness import DiscoveryBusiness
from Discovery.Business.ProfileMapper import build_profile_draft
from Discovery.AI.response_parser import coerce_suggestion
from Discovery.Routes.validators import validate_discover_payload, validate_profile_payload, map_suggestions

import logging
logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)

"""Create and configure the Flask application.
    Args:
        config: Optional configuration dictionary; a `DISCOVERY_BUSINESS`
                entry replaces the default discovery service (used by tests)
    Returns:
        Flask application instance
"""
def CreateApp(config=None):

    app = Flask(__name__)
    if config:
        app.config.update(config)
    # Load environment variables from .env
    load_env_file()
    # Enable CORS for all routes
    CORS(app)
    RegisterRoutes(app)
    return app


def _get_business(app: Flask) -> DiscoveryBusiness:
    business = app.config.get("DISCOVERY_BUSINESS")
    if business is None:
        business = DiscoveryBusiness()
        app.config["DISCOVERY_BUSINESS"] = business
    return business

"""Register all API routes.
    Args:
        app: Flask application instance
"""
def RegisterRoutes(app: Flask) -> None:

    @app.route("/")
    def index():
        return "App is running!"

    @app.route('/api/health-check', methods=['GET'])
    def HealthCheck():
        return jsonify({
            "status": "healthy",
            "message": "Celebrity Discovery API is running"
        }), 200

    """Discover celebrities matching a free-text description.
        Request JSON body:
        {
            "description": "Punjabi singer from India who performed at Coachella"   # Required, max 500 chars
        }
        Returns:
            JSON with suggestions, query_interpretation and total_found.
            Discovery itself never fails; only invalid input yields an error.
    """
    @app.route('/api/ai/discover-celebrity', methods=['POST'])
    def DiscoverCelebrityEndpoint():
        try:
            data = request.get_json(silent=True) or {}
            description = validate_discover_payload(data)
            logger.info("Discovering celebrities for: %s", description)
            result = _get_business(app).discover(description)
            return jsonify({
                "suggestions": map_suggestions(result),
                "query_interpretation": result.query_interpretation,
                "total_found": result.total_found,
            }), 200

        except ValueError as e:
            logger.error("Validation error: %s", e)
            return jsonify({
                "error": "invalid_parameter",
                "message": str(e)
            }), 400

        except Exception as e:
            logger.exception("Error discovering celebrities: %s", e)
            return jsonify({
                "error": "internal_error",
                "message": f"Internal server error: {str(e)}"
            }), 500

    """Build a celebrity profile draft from a (possibly partial) suggestion.
        Request JSON body:
        {
            "suggestion": {"name": "...", "instagram_handle": "...", ...}
        }
    """
    @app.route('/api/ai/profile-draft', methods=['POST'])
    def ProfileDraftEndpoint():
        try:
            data = request.get_json(silent=True) or {}
            raw = validate_profile_payload(data)
            draft = build_profile_draft(coerce_suggestion(raw))
            return jsonify(draft.to_dict()), 200

        except ValueError as e:
            logger.error("Validation error: %s", e)
            return jsonify({"error": "invalid_parameter", "message": str(e)}), 400

        except Exception as e:
            logger.exception("Error building profile draft: %s", e)
            return jsonify({"error": "internal_error", "message": str(e)}), 500

    @app.errorhandler(404)
    def NotFound(error):
        return jsonify({
            "error": "not_found",
            "message": "Endpoint not found. Try GET /api/health-check or POST /api/ai/discover-celebrity"
        }), 404

    @app.errorhandler(405)
    def MethodNotAllowed(error):
        return jsonify({
            "error": "method_not_allowed",
            "message": "Method not allowed for this endpoint"
        }), 405
