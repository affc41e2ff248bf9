"""initial_schema

Create the schema for Pact:
- Users (read model for matching, admin flag)
- Partnerships (month-long pairings with a status lifecycle)
- Exclusions (one-directional "never match me with" records)
- Invite codes (consumable registration tokens, optimistic versioning)
- Reports (safety reports with a review workflow)

Revision ID: 3c1f9a2d7b40
Revises:
Create Date: 2026-10-17 09:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f9a2d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _uuid_pk() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _uuid_pk(),
        sa.Column("username", sa.String(30), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("gender", sa.String(20), nullable=False),
        sa.Column(
            "contact_preference",
            sa.String(20),
            nullable=False,
            server_default="app_only",
        ),
        sa.Column("timezone", sa.String(64), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default="false"),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_users_username"),
        sa.CheckConstraint(
            "gender IN ('male', 'female', 'non_binary', 'prefer_not_to_say')",
            name="ck_users_gender",
        ),
        sa.CheckConstraint(
            "contact_preference IN ('text', 'email', 'app_only')",
            name="ck_users_contact_preference",
        ),
    )
    op.create_index("idx_users_is_active", "users", ["is_active"])

    # ========================================================================
    # PARTNERSHIPS table
    # ========================================================================
    op.create_table(
        "partnerships",
        _uuid_pk(),
        sa.Column("user_a_id", sa.UUID(), nullable=False),
        sa.Column("user_b_id", sa.UUID(), nullable=False),
        sa.Column("start_date", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("end_date", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        _created_at(),
        sa.ForeignKeyConstraint(["user_a_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["user_b_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('active', 'completed', 'ended_early', 'cancelled')",
            name="ck_partnerships_status",
        ),
        sa.CheckConstraint(
            "user_a_id <> user_b_id", name="ck_partnerships_distinct_users"
        ),
        sa.CheckConstraint("end_date > start_date", name="ck_partnerships_dates"),
    )
    op.create_index(
        "idx_partnerships_user_a_status", "partnerships", ["user_a_id", "status"]
    )
    op.create_index(
        "idx_partnerships_user_b_status", "partnerships", ["user_b_id", "status"]
    )
    op.create_index(
        "idx_partnerships_created_at",
        "partnerships",
        [sa.text("created_at DESC")],
    )

    # ========================================================================
    # EXCLUSIONS table (duplicates allowed; see add-exclusion use case)
    # ========================================================================
    op.create_table(
        "exclusions",
        _uuid_pk(),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column("excluded_id", sa.UUID(), nullable=False),
        sa.Column("reason", sa.Text(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["excluded_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_exclusions_owner_excluded", "exclusions", ["owner_id", "excluded_id"]
    )

    # ========================================================================
    # INVITE_CODES table
    # ========================================================================
    op.create_table(
        "invite_codes",
        sa.Column("code", sa.String(20), nullable=False),
        sa.Column("created_by", sa.UUID(), nullable=False),
        sa.Column("used_by", sa.UUID(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("max_uses", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("current_uses", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=True),
        _created_at(),
        sa.Column("used_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("revoked_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("version", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["created_by"], ["users.id"]),
        sa.ForeignKeyConstraint(["used_by"], ["users.id"]),
        sa.PrimaryKeyConstraint("code"),
        sa.CheckConstraint(
            "current_uses >= 0 AND current_uses <= max_uses",
            name="ck_invite_codes_uses",
        ),
        sa.CheckConstraint("max_uses >= 1", name="ck_invite_codes_max_uses"),
    )
    op.create_index(
        "idx_invite_codes_created_at",
        "invite_codes",
        [sa.text("created_at DESC")],
    )

    # ========================================================================
    # REPORTS table
    # ========================================================================
    op.create_table(
        "reports",
        _uuid_pk(),
        sa.Column("reporter_id", sa.UUID(), nullable=False),
        sa.Column("reported_id", sa.UUID(), nullable=False),
        sa.Column("partnership_id", sa.UUID(), nullable=True),
        sa.Column("reason", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        _created_at(),
        sa.ForeignKeyConstraint(["reporter_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["reported_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["partnership_id"], ["partnerships.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('pending', 'investigating', 'resolved', 'dismissed')",
            name="ck_reports_status",
        ),
    )
    op.create_index(
        "idx_reports_status_created_at",
        "reports",
        ["status", sa.text("created_at DESC")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("reports")
    op.drop_table("invite_codes")
    op.drop_table("exclusions")
    op.drop_table("partnerships")
    op.drop_table("users")
