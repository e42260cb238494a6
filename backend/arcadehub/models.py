from datetime import datetime, timezone

from arcadehub import db


def _utcnow():
    return datetime.now(timezone.utc)


class Score(db.Model):
    """Best score of one player on one game."""
    __tablename__ = 'score'
    __table_args__ = (
        db.UniqueConstraint('player_name', 'game_name', name='uq_score_player_game'),
    )
    id = db.Column(db.Integer, primary_key=True)
    game_name = db.Column(db.String(64), nullable=False, index=True)
    player_name = db.Column(db.String(64), nullable=False)
    score = db.Column(db.Float, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow, nullable=False)

    def to_dict(self):
        value = self.score
        if value is not None and float(value).is_integer():
            value = int(value)
        return {
            'id': self.id,
            'playerName': self.player_name,
            'gameName': self.game_name,
            'score': value,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }
