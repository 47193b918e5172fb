from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from dotenv import load_dotenv
from flask_migrate import Migrate
from flask_compress import Compress

# Load environment variables early so config is available for blueprint creation
load_dotenv()

from quizmaster.config import config  # noqa: E402

db = SQLAlchemy()
migrate = Migrate()
login_manager = LoginManager()
compress = Compress()


def create_app() -> Flask:
    """
    Application factory for the Flask app.
    Loads configuration from the environment, configures the database,
    and registers blueprints and error handlers.
    """
    # Re-initialize config to ensure latest .env values are loaded
    from quizmaster.config import Config
    global config
    config = Config()

    # Validate configuration
    config.validate()

    app = Flask(__name__)

    # Load configuration from config module
    app.config["SECRET_KEY"] = config.SECRET_KEY
    app.config["SQLALCHEMY_DATABASE_URI"] = config.SQLALCHEMY_DATABASE_URI
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = config.SQLALCHEMY_TRACK_MODIFICATIONS
    app.config["SQLALCHEMY_ECHO"] = config.SQLALCHEMY_ECHO
    if config.uses_mysql:
        # Connection pooling only applies to the MySQL server backend
        app.config["SQLALCHEMY_ENGINE_OPTIONS"] = {
            "pool_size": 10,
            "pool_recycle": 3600,
            "pool_pre_ping": True,
            "max_overflow": 20,
            "connect_args": {
                "connect_timeout": 5,
                "read_timeout": 10,
                "write_timeout": 10,
                "charset": "utf8mb4",
            }
        }

    app.config["CORS_ALLOWED_ORIGINS"] = config.CORS_ALLOWED_ORIGINS
    app.config["MIN_PASSWORD_LENGTH"] = config.MIN_PASSWORD_LENGTH
    app.config["PASSWORD_HASH_ROUNDS"] = config.PASSWORD_HASH_ROUNDS

    # Response compression settings
    app.config["COMPRESS_MIMETYPES"] = ['application/json']
    app.config["COMPRESS_LEVEL"] = 6
    app.config["COMPRESS_MIN_SIZE"] = 500  # Only compress responses > 500 bytes
    app.config["SESSION_COOKIE_SECURE"] = config.SESSION_COOKIE_SECURE
    app.config["SESSION_COOKIE_HTTPONLY"] = config.SESSION_COOKIE_HTTPONLY
    app.config["SESSION_COOKIE_SAMESITE"] = config.SESSION_COOKIE_SAMESITE

    app.logger.setLevel(config.LOG_LEVEL)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    compress.init_app(app)

    # CORS and security headers
    from quizmaster.security import init_security
    init_security(app)

    from quizmaster.common.errors import error_response, register_error_handlers
    register_error_handlers(app)

    @login_manager.user_loader
    def load_student(student_id):
        from quizmaster.auth.service import build_student_service
        try:
            return build_student_service().get(int(student_id))
        except (ValueError, TypeError):
            return None

    @login_manager.unauthorized_handler
    def unauthorized():
        return error_response(401, ["Authentication required"])

    # Register blueprints
    from quizmaster.quiz import quiz_bp
    app.register_blueprint(quiz_bp)

    from quizmaster.auth import auth_bp
    app.register_blueprint(auth_bp)

    from quizmaster.quiz.seed import seed_sample_data, seed_sample_data_command
    app.cli.add_command(seed_sample_data_command)

    # Create tables if they do not exist
    with app.app_context():
        from quizmaster.quiz import models  # noqa: F401
        from quizmaster.auth.models import Student  # noqa: F401
        db.create_all()
        if config.SEED_SAMPLE_DATA:
            seed_sample_data()

    app.logger.info("QuizMaster application created")
    return app
