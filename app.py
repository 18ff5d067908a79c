import logging
from flask import Flask, request, jsonify, current_app
from flask_cors import CORS

from config import Config
from errors import register_error_handlers
from schemas import (
    LoginRequest,
    PointsRequest,
    PostRequest,
    ProgressRequest,
    RegisterRequest,
    parse,
)
from storage import JsonFileStore
from Authentication import UserService
from Progress import ProgressService
from Community import CommunityService

logger = logging.getLogger(__name__)


def create_app(config=Config, store=None):
    app = Flask(__name__)
    app.config.from_object(config)
    app.json.sort_keys = False

    # Configure logging
    logging.basicConfig(level=app.config.get("LOG_LEVEL", "INFO"))

    CORS(app, resources={r"/api/*": {
        "origins": app.config.get("FRONTEND_URL", "*"),
        "methods": ["GET", "POST", "OPTIONS"],
        "allow_headers": ["Content-Type"]
    }})

    if store is None:
        store = JsonFileStore(app.config["DATA_DIR"])
        logger.info(f"Using data directory {store.data_dir}")
    app.extensions["users"] = UserService(store)
    app.extensions["progress"] = ProgressService(store)
    app.extensions["community"] = CommunityService(store)

    register_error_handlers(app)
    register_routes(app)
    return app


def _body():
    return request.get_json(silent=True) or {}


def _service(name):
    return current_app.extensions[name]


def register_routes(app):
    # ---------- User endpoints ----------

    @app.route("/api/register", methods=["POST"])
    def register():
        data = parse(RegisterRequest, _body())
        result = _service("users").register(data.username, data.password, **data.profile())
        return jsonify(result), 200

    # Profile without password hash/salt
    @app.route("/api/login", methods=["POST"])
    def login():
        data = parse(LoginRequest, _body())
        return jsonify(_service("users").authenticate(data.username, data.password)), 200

    @app.route("/api/user/<username>", methods=["GET"])
    def get_user(username):
        return jsonify(_service("users").get_profile(username)), 200

    @app.route("/api/user/<username>/points", methods=["POST"])
    def add_points(username):
        data = parse(PointsRequest, _body())
        total = _service("users").add_points(username, data.points)
        return jsonify({"points": total}), 200

    # ---------- Progress endpoints ----------

    @app.route("/api/user/<username>/progress", methods=["POST"])
    def log_progress(username):
        data = parse(ProgressRequest, _body())
        result = _service("progress").log_progress(username, data.steps, data.minutes)
        return jsonify(result), 200

    @app.route("/api/user/<username>/progress", methods=["GET"])
    def get_progress(username):
        return jsonify(_service("progress").list_progress(username)), 200

    # ---------- Community endpoints ----------

    @app.route("/api/community", methods=["GET"])
    def get_posts():
        return jsonify(_service("community").list_posts()), 200

    @app.route("/api/community", methods=["POST"])
    def create_post():
        data = parse(PostRequest, _body())
        result = _service("community").create_post(
            data.username,
            data.description,
            title=data.title,
            image=data.image,
            duration=data.duration,
            activity_type=data.activityType,
        )
        return jsonify(result), 200

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"}), 200


if __name__ == "__main__":
    app = create_app()
    app.run(host=Config.HOST, port=Config.PORT)
