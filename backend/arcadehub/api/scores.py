import math

from flask import Blueprint, jsonify, request, current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from arcadehub.services.scores.ranking import CREATED, IMPROVED, submit_score, top_scores


scores = Blueprint('scores', __name__)

INVALID_MESSAGE = "Données invalides (pseudo 3 car. min, score, nom du jeu)."
INTERNAL_ERROR_MESSAGE = "Erreur interne du serveur."


def _first(data, *keys):
    for key in keys:
        if data.get(key) is not None:
            return data.get(key)
    return None


def _finite(value):
    # NaN, Infinity and ints beyond float range
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


@scores.route('', methods=['POST'])
def post_score():
    data = request.get_json(silent=True) or {}
    cfg = current_app.config
    player = _first(data, 'player', 'playerName')
    game = _first(data, 'game', 'gameName')
    value = data.get('score')

    min_len = int(cfg.get('PLAYER_NAME_MIN_LENGTH', 3))
    max_len = int(cfg.get('PLAYER_NAME_MAX_LENGTH', 15))
    if not isinstance(player, str) or len(player.strip()) < min_len:
        return jsonify({'message': INVALID_MESSAGE}), 400
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return jsonify({'message': INVALID_MESSAGE}), 400
    if not _finite(value):
        return jsonify({'message': INVALID_MESSAGE}), 400
    if not isinstance(game, str) or not game.strip():
        return jsonify({'message': INVALID_MESSAGE}), 400

    player = player.strip()[:max_len]
    game = game.strip()
    try:
        entry, outcome = submit_score(player, game, value, cfg.get('SCORE_ASCENDING_GAMES', ()))
    except IntegrityError:
        return jsonify({'message': "Ce pseudo est déjà pris pour ce jeu."}), 409
    except SQLAlchemyError:
        current_app.logger.exception(f"[score-fail] player={player} game={game}")
        return jsonify({'message': INTERNAL_ERROR_MESSAGE}), 500

    if outcome == CREATED:
        current_app.logger.info(f"[score-new] game={game} player={player} score={value}")
        return jsonify({'message': "Score enregistré !", 'player': entry.to_dict()}), 201
    if outcome == IMPROVED:
        current_app.logger.info(f"[score-best] game={game} player={player} score={value}")
        return jsonify({'message': "Meilleur score mis à jour !", 'player': entry.to_dict()}), 200
    return jsonify({'message': "Le score n'a pas dépassé le record."}), 200


@scores.route('/<string:game_name>', methods=['GET'])
def get_leaderboard(game_name):
    cfg = current_app.config
    try:
        rows = top_scores(
            game_name,
            int(cfg.get('SCORE_LEADERBOARD_SIZE', 10)),
            cfg.get('SCORE_ASCENDING_GAMES', ()),
        )
    except SQLAlchemyError:
        current_app.logger.exception(f"[leaderboard-fail] game={game_name}")
        return jsonify({'message': INTERNAL_ERROR_MESSAGE}), 500
    return jsonify([row.to_dict() for row in rows])
