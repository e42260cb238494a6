"""create score table

Revision ID: 4c2a9e7d1b3f
Revises:
Create Date: 2026-10-17 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4c2a9e7d1b3f'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)

    # Databases created with `flask db-reset` already have the table
    if 'score' in set(insp.get_table_names()):
        return

    op.create_table(
        'score',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('game_name', sa.String(length=64), nullable=False),
        sa.Column('player_name', sa.String(length=64), nullable=False),
        sa.Column('score', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('player_name', 'game_name', name='uq_score_player_game'),
    )
    op.create_index('ix_score_game_name', 'score', ['game_name'], unique=False)


def downgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    if 'score' not in set(insp.get_table_names()):
        return
    op.drop_index('ix_score_game_name', table_name='score')
    op.drop_table('score')
