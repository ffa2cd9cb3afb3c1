import logging
import os
from datetime import timedelta

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS
from flask_migrate import Migrate
from flask_smorest import Api
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from access import AccessPolicy
from db import db
from errors import ApiError, InternalError
from session_store import SessionStore
from setup_db import init_db_command

from resources.project import blp as ProjectBlueprint
from resources.task import blp as TaskBlueprint
from resources.user import blp as UserBlueprint

logger = logging.getLogger(__name__)

# Reads a local .env file, if present, into os.environ
load_dotenv()


def check_database_connection(app):
    # Reports connectivity at startup, never fatal
    with app.app_context():
        try:
            db.session.execute(text("SELECT 1"))
            logger.info("Connection to database established successfully.")
            return True
        except SQLAlchemyError as e:
            logger.error("Unable to connect to the database: %s", e)
            return False
        finally:
            db.session.remove()


def create_app(db_url = None, config = None):
    app = Flask(__name__)

    logging.basicConfig(
        level = os.getenv("LOG_LEVEL", "INFO"),
        format = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )

    FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000")

    # Cookie sessions need credentials on cross-origin requests
    CORS(
        app,
        resources = {r"/api/*": {
            "origins": [FRONTEND_URL],
            "supports_credentials": True,
            "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            "allow_headers": ["Content-Type", "Accept"],
            "max_age": 86400
        }},
    )

    app.config["API_TITLE"] = "Task Management API"
    app.config["API_VERSION"] = "v1"
    app.config["OPENAPI_VERSION"] = "3.0.3"
    app.config["OPENAPI_URL_PREFIX"] = "/"
    app.config["OPENAPI_SWAGGER_UI_PATH"] = "/swagger-ui"
    app.config["OPENAPI_SWAGGER_UI_URL"] = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/"
    app.config["SQLALCHEMY_DATABASE_URI"] = db_url or os.getenv("DATABASE_URL", "sqlite:///task_management.db")
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    app.config["AUTH_COOKIE_NAME"] = os.getenv("AUTH_COOKIE_NAME", "sid")
    # Seconds; sessions are not extended by activity
    app.config["SESSION_MAX_AGE"] = int(os.getenv("SESSION_MAX_AGE", "3600"))
    # "scoped-to-owner" or "open"
    app.config["PROJECT_DELETE_POLICY"] = os.getenv("PROJECT_DELETE_POLICY", AccessPolicy.OWNER.value)
    app.config["PORT"] = int(os.getenv("PORT", "3000"))

    if config:
        app.config.update(config)

    # Fail at startup rather than on the first delete request
    AccessPolicy(app.config["PROJECT_DELETE_POLICY"])

    # Connects Flask app to SQLAlchemy
    db.init_app(app)
    api = Api(app)

    # Initialize flask migrate
    Migrate(app, db)

    session_store = SessionStore(max_age = timedelta(seconds = app.config["SESSION_MAX_AGE"]))
    session_store.init_app(app)

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        if error.status_code >= 500:
            logger.error("Request failed: %s", error.message)
        else:
            # Message only; request bodies may hold credentials
            logger.warning("Request rejected (%s): %s", error.status_code, error.message)
        return jsonify(error.to_dict()), error.status_code

    # Anything not raised as an ApiError; framework HTTP errors keep their own handler
    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception("Unhandled error: %s", error)
        db.session.rollback()
        internal = InternalError()
        return jsonify(internal.to_dict()), internal.status_code

    api.register_blueprint(UserBlueprint)
    api.register_blueprint(ProjectBlueprint)
    api.register_blueprint(TaskBlueprint)

    app.cli.add_command(init_db_command)

    check_database_connection(app)

    return app


if __name__ == "__main__":
    application = create_app()
    logger.info("Server running on port http://localhost:%s", application.config["PORT"])
    application.run(port = application.config["PORT"])
