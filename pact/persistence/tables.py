"""SQLAlchemy table definitions for Pact.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(30), nullable=False, unique=True),
    Column("name", String(100), nullable=False),
    Column("gender", String(20), nullable=False),
    Column(
        "contact_preference", String(20), nullable=False, server_default="app_only"
    ),
    Column("timezone", String(64), nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("is_admin", Boolean, nullable=False, server_default="false"),
    Column("password_hash", String(60), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("last_login_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint(
        "gender IN ('male', 'female', 'non_binary', 'prefer_not_to_say')",
        name="ck_users_gender",
    ),
    CheckConstraint(
        "contact_preference IN ('text', 'email', 'app_only')",
        name="ck_users_contact_preference",
    ),
)

Index("idx_users_is_active", users_table.c.is_active)

# ============================================================================
# PARTNERSHIPS TABLE
# ============================================================================
partnerships_table = Table(
    "partnerships",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_a_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("user_b_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("start_date", TIMESTAMP(timezone=True), nullable=False),
    Column("end_date", TIMESTAMP(timezone=True), nullable=False),
    Column("status", String(20), nullable=False, server_default="active"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "status IN ('active', 'completed', 'ended_early', 'cancelled')",
        name="ck_partnerships_status",
    ),
    CheckConstraint("user_a_id <> user_b_id", name="ck_partnerships_distinct_users"),
    CheckConstraint("end_date > start_date", name="ck_partnerships_dates"),
)

Index(
    "idx_partnerships_user_a_status",
    partnerships_table.c.user_a_id,
    partnerships_table.c.status,
)
Index(
    "idx_partnerships_user_b_status",
    partnerships_table.c.user_b_id,
    partnerships_table.c.status,
)
Index("idx_partnerships_created_at", partnerships_table.c.created_at.desc())

# ============================================================================
# EXCLUSIONS TABLE
# ============================================================================
# Duplicate (owner, excluded) pairs are permitted at this level
exclusions_table = Table(
    "exclusions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "owner_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "excluded_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("reason", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_exclusions_owner_excluded",
    exclusions_table.c.owner_id,
    exclusions_table.c.excluded_id,
)

# ============================================================================
# INVITE CODES TABLE
# ============================================================================
invite_codes_table = Table(
    "invite_codes",
    metadata,
    Column("code", String(20), primary_key=True),
    Column("created_by", UUID, ForeignKey("users.id"), nullable=False),
    Column("used_by", UUID, ForeignKey("users.id"), nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("max_uses", Integer, nullable=False, server_default="1"),
    Column("current_uses", Integer, nullable=False, server_default="0"),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("used_at", TIMESTAMP(timezone=True), nullable=True),
    Column("revoked_at", TIMESTAMP(timezone=True), nullable=True),
    Column("version", Integer, nullable=False, server_default="0"),
    CheckConstraint(
        "current_uses >= 0 AND current_uses <= max_uses",
        name="ck_invite_codes_uses",
    ),
    CheckConstraint("max_uses >= 1", name="ck_invite_codes_max_uses"),
)

Index("idx_invite_codes_created_at", invite_codes_table.c.created_at.desc())

# ============================================================================
# REPORTS TABLE
# ============================================================================
reports_table = Table(
    "reports",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("reporter_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("reported_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("partnership_id", UUID, ForeignKey("partnerships.id"), nullable=True),
    Column("reason", String(200), nullable=False),
    Column("description", Text, nullable=True),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "status IN ('pending', 'investigating', 'resolved', 'dismissed')",
        name="ck_reports_status",
    ),
)

Index(
    "idx_reports_status_created_at",
    reports_table.c.status,
    reports_table.c.created_at.desc(),
)
