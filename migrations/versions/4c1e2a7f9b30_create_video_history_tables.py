"""create video history tables

Revision ID: 4c1e2a7f9b30
Revises:
Create Date: 2026-10-17 10:12:41.208113

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.schema import CreateTable


# revision identifiers, used by Alembic.
revision = '4c1e2a7f9b30'
down_revision = None
branch_labels = None
depends_on = None

metadata = sa.MetaData()

video_info = sa.Table(
    'video_info',
    metadata,
    sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
    sa.Column('video_id', sa.Text(), nullable=False),
    sa.Column('title', sa.Text(), nullable=False),
    sa.Column('author', sa.Text(), nullable=False),
    sa.Column('duration_seconds', sa.Text(), nullable=False),
    sa.Column('thumbnail', sa.Text(), nullable=True),
    sa.Column('audio_available', sa.Boolean(), nullable=False),
    sa.PrimaryKeyConstraint('id'),
    sqlite_autoincrement=True,
)

video_format = sa.Table(
    'video_format',
    metadata,
    sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
    sa.Column('container', sa.Text(), nullable=False),
    sa.Column('width', sa.Text(), nullable=False),
    sa.Column('height', sa.Text(), nullable=False),
    sa.Column('fps', sa.Text(), nullable=False),
    sa.Column('video_info_id', sa.Integer(), nullable=False),
    sa.ForeignKeyConstraint(['video_info_id'], ['video_info.id'], ondelete='CASCADE'),
    sa.PrimaryKeyConstraint('id'),
    sqlite_autoincrement=True,
)


def upgrade() -> None:
    # IF NOT EXISTS: stores initialised by create_schema() already hold the tables
    op.execute(CreateTable(video_info, if_not_exists=True))
    op.execute(CreateTable(video_format, if_not_exists=True))


def downgrade() -> None:
    op.drop_table('video_format')
    op.drop_table('video_info')
