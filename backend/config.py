import os


def _csv(name, default):
    raw = os.environ.get(name, default)
    return tuple(part.strip() for part in raw.split(',') if part.strip())


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///arcadehub.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # '*' allows any origin for both HTTP and the socket transport
    CORS_ORIGINS = _csv('CORS_ORIGINS', '*')
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    # Session codes
    SESSION_CODE_LENGTH = int(os.environ.get('SESSION_CODE_LENGTH', '4'))
    SESSION_CODE_ALPHABET = os.environ.get('SESSION_CODE_ALPHABET', 'ABCDEFGHIJKLMNOPQRSTUVWXYZ')
    SESSION_CODE_MAX_ATTEMPTS = int(os.environ.get('SESSION_CODE_MAX_ATTEMPTS', '1000'))
    # Role tokens handed out on pairing, host first
    SESSION_ROLES = _csv('SESSION_ROLES', 'X,O')
    # Leaderboards where a lower score wins (reaction times and the like)
    SCORE_ASCENDING_GAMES = _csv('SCORE_ASCENDING_GAMES', 'reflex')
    SCORE_LEADERBOARD_SIZE = int(os.environ.get('SCORE_LEADERBOARD_SIZE', '10'))
    PLAYER_NAME_MIN_LENGTH = int(os.environ.get('PLAYER_NAME_MIN_LENGTH', '3'))
    PLAYER_NAME_MAX_LENGTH = int(os.environ.get('PLAYER_NAME_MAX_LENGTH', '15'))
    # Optional directory of front-end assets served at '/'
    STATIC_ROOT = os.environ.get('STATIC_ROOT')
