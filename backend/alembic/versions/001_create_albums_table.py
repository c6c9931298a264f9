"""Create albums table

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates the `albums` table and the artist lookup index.
Rollback: downgrade() drops the table (all album data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "albums",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("artist", sa.String(50), nullable=False),
        # Exposed as `date` by the API
        sa.Column("release_date", sa.Date(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    # GET /albums/{artist} filters on artist equality
    op.create_index("idx_albums_artist", "albums", ["artist"])


def downgrade() -> None:
    op.drop_index("idx_albums_artist", table_name="albums")
    op.drop_table("albums")
