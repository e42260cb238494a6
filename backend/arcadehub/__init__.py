from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
socketio = SocketIO(async_mode=None)


def _origins(value):
    origins = list(value or ['*'])
    return '*' if '*' in origins else origins


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    allowed_origins = _origins(flask_app.config.get('CORS_ORIGINS'))

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from arcadehub.main import main
    flask_app.register_blueprint(main)

    from arcadehub.api.scores import scores
    flask_app.register_blueprint(scores, url_prefix='/api/scores')

    # Session broker: one gateway per app, bound to the Socket.IO namespace
    from arcadehub.socketio_events import init_session_broker
    init_session_broker(flask_app)

    @click.command('db-reset')
    def db_reset_command():
        """Drops and recreates the database."""
        import arcadehub.models  # noqa: F401
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            print('Database has been reset!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
