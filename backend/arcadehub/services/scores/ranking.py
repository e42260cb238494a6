from typing import Iterable, List, Optional, Tuple

from arcadehub import db
from arcadehub.models import Score

CREATED = 'created'
IMPROVED = 'improved'
UNCHANGED = 'unchanged'


def is_ascending(game: str, ascending_games: Iterable[str]) -> bool:
    return game in set(ascending_games)


def is_better(new: float, old: Optional[float], ascending: bool) -> bool:
    if old is None:
        return True
    return new < old if ascending else new > old


def submit_score(player: str, game: str, value: float,
                 ascending_games: Iterable[str]) -> Tuple[Score, str]:
    """Insert or improve the (player, game) entry.

    Returns the stored row and one of CREATED / IMPROVED / UNCHANGED.
    The caller owns error handling; an IntegrityError from a concurrent
    insert propagates after rollback.
    """
    ascending = is_ascending(game, ascending_games)
    entry = Score.query.filter_by(player_name=player, game_name=game).first()
    if entry is None:
        entry = Score(player_name=player, game_name=game, score=value)
        db.session.add(entry)
        outcome = CREATED
    elif is_better(value, entry.score, ascending):
        entry.score = value
        db.session.add(entry)
        outcome = IMPROVED
    else:
        return entry, UNCHANGED
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return entry, outcome


def top_scores(game: str, limit: int, ascending_games: Iterable[str]) -> List[Score]:
    """Best ``limit`` positive scores for ``game``, earliest first on ties."""
    order = Score.score.asc() if is_ascending(game, ascending_games) else Score.score.desc()
    return (
        Score.query
        .filter(Score.game_name == game, Score.score > 0)
        .order_by(order, Score.created_at.asc(), Score.id.asc())
        .limit(limit)
        .all()
    )
