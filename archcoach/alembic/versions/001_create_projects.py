"""Create projects table

Revision ID: 001
Revises:
Create Date: 2026-10-19

Adds the projects table holding saved practice sessions. Diagram, chat
history and evaluation are stored as JSONB.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'projects',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('scenario_id', sa.String(100), nullable=False),
        sa.Column('diagram_data', postgresql.JSONB(), nullable=True),
        sa.Column('chat_history', postgresql.JSONB(), nullable=True),
        sa.Column('evaluation', postgresql.JSONB(), nullable=True),
        sa.Column('last_modified', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table('projects')
