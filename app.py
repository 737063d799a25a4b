import os
import logging
from datetime import datetime

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config import Config
from extensions import db, migrate, jwt
from utils.errors import ApiError

# Blueprints
from users.routes import auth_bp
from complaints.routes import complaint_bp
from stats.routes import stats_bp
import utils.auth  # noqa: F401  registers the JWT user loader callbacks


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    # ✅ CORS for the SPA (bearer header, credentials allowed)
    CORS(
        app,
        origins=app.config["CORS_ORIGINS"],
        supports_credentials=True,
        methods=['GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS'],
        allow_headers=['Content-Type', 'Authorization'],
    )

    # ✅ Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    # ✅ Register Blueprints
    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(complaint_bp, url_prefix="/api/complaints")
    app.register_blueprint(stats_bp, url_prefix="/api/stats")

    # ✅ Liveness
    @app.route("/api/health")
    def health():
        return jsonify({
            "status": "OK",
            "message": "CampusAlert API is running",
            "timestamp": datetime.utcnow().isoformat() + "Z",
            "environment": app.config["ENVIRONMENT"],
        }), 200

    # ✅ Demo accounts from the command line
    @app.cli.command("seed-demo")
    def seed_demo_command():
        """Create the demo student and admin accounts."""
        from users.utils import seed_demo_accounts
        created = seed_demo_accounts()
        print(f"Created: {', '.join(created)}" if created else "Demo accounts already exist")

    # ✅ Error handlers
    @app.errorhandler(ApiError)
    def api_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def http_error(error):
        if error.code == 404 and request.path.startswith("/api"):
            return jsonify({"message": "API endpoint not found"}), 404
        return jsonify({"message": error.description}), error.code

    @app.errorhandler(Exception)
    def internal_error(error):
        app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        db.session.rollback()
        message = "Internal server error" if app.config["ENVIRONMENT"] == "production" else str(error)
        return jsonify({"message": message}), 500

    return app


app = create_app()

if __name__ == '__main__':
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", 5000)), debug=app.config["ENVIRONMENT"] == "development")
