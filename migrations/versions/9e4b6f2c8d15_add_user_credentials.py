"""add user credentials

Add password login to users:
- password_hash (bcrypt, nullable for accounts created before this change)
- last_login_at

Revision ID: 9e4b6f2c8d15
Revises: 3c1f9a2d7b40
Create Date: 2026-10-17 15:40:02.771934

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9e4b6f2c8d15"
down_revision: Union[str, Sequence[str], None] = "3c1f9a2d7b40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.add_column(
        "users",
        sa.Column("password_hash", sa.String(length=60), nullable=True),
    )
    op.add_column(
        "users",
        sa.Column("last_login_at", sa.TIMESTAMP(timezone=True), nullable=True),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_column("users", "last_login_at")
    op.drop_column("users", "password_hash")
