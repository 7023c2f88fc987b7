"""create workouts and sets

Revision ID: 0001
Revises:
Create Date: 2026-10-18 10:12:41.318204

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 1) workouts table
    op.create_table(
        'workouts',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('date', sa.Text()),
        sa.Column('name', sa.Text()),
        sa.Column('sets', sa.Integer()),
        sa.Column('reps', sa.Integer()),
        sa.Column('comment', sa.Text()),
        sqlite_autoincrement=True,
    )

    # 2) sets table; deliberately no foreign key to workouts
    op.create_table(
        'sets',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('workoutId', sa.Integer()),
        sa.Column('setIndex', sa.Integer()),
        sa.Column('reps', sa.Integer()),
        sa.Column('done', sa.Integer()),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    op.drop_table('sets')
    op.drop_table('workouts')
