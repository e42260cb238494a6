import os

from flask import Blueprint, abort, current_app, jsonify, send_from_directory

main = Blueprint('main', __name__)


def _static_root():
    root = current_app.config.get('STATIC_ROOT')
    if root and os.path.isdir(root):
        return root
    return None


@main.route('/api/health')
def health():
    gateway = current_app.extensions.get('session_broker')
    return jsonify({
        'status': 'ok',
        'active_sessions': gateway.active_sessions() if gateway else 0,
    })


@main.route('/')
def index():
    root = _static_root()
    if root and os.path.isfile(os.path.join(root, 'index.html')):
        return send_from_directory(root, 'index.html')
    return jsonify({'message': 'Welcome to the ArcadeHub game server!'})


@main.route('/<path:filename>')
def static_asset(filename):
    root = _static_root()
    if not root:
        abort(404)
    # send_from_directory refuses paths escaping root
    return send_from_directory(root, filename)
