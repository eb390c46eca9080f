"""Create notes table

Revision ID: 4f1c2a9e7b10
Revises:
Create Date: 2025-09-20 10:12:31.418207

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from quicknotes.core.models.types import GUID, UTCDateTime


# revision identifiers, used by Alembic.
revision: str = '4f1c2a9e7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'notes',
        sa.Column('id', GUID(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('created_at', UTCDateTime(), nullable=False),
        sa.Column('updated_at', UTCDateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('length(title) <= 255', name='ck_notes_title_len'),
        sa.CheckConstraint('updated_at >= created_at', name='ck_notes_updated_after_created'),
    )
    op.create_index('idx_notes_created_at', 'notes', ['created_at'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_notes_created_at', table_name='notes')
    op.drop_table('notes')
