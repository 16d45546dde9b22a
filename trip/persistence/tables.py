"""SQLAlchemy table definitions for the trip planner.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Float,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

from trip.domain.value import ItemType

# Metadata object for all tables
metadata = MetaData()


def _timestamps() -> list[Column]:
    return [
        Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
        Column("updated_at", TIMESTAMP, nullable=False, server_default="NOW()"),
    ]


# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(100), nullable=False, unique=True),
    Column("pin_hash", String(64), nullable=False),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
)

# ============================================================================
# ITEM TABLES (one per variant)
# ============================================================================
flights_table = Table(
    "flights",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("traveler_name", String(200), nullable=False),
    Column("airline", String(200), nullable=True),
    Column("price_3_night", Float, nullable=True),
    Column("price_4_night", Float, nullable=True),
    Column("inbound_flight", Text, nullable=True),
    Column("outbound_flight", Text, nullable=True),
    Column("notes", Text, nullable=True),
    *_timestamps(),
)

hotels_table = Table(
    "hotels",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(300), nullable=False),
    Column("url", Text, nullable=True),
    Column("total_price", Float, nullable=False, server_default="0"),
    Column("per_person", Float, nullable=False, server_default="0"),
    Column("includes", Text, nullable=True),
    Column("neighborhood", String(200), nullable=True),
    Column("notes", Text, nullable=True),
    Column("price_3_night_tay", Float, nullable=True),
    Column("price_3_night_scar", Float, nullable=True),
    Column("price_4_night_tay", Float, nullable=True),
    Column("price_4_night_scar", Float, nullable=True),
    *_timestamps(),
)

Index("idx_hotels_per_person", hotels_table.c.per_person)

activities_table = Table(
    "activities",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(300), nullable=False),
    Column("url", Text, nullable=True),
    Column("address", Text, nullable=True),
    Column("neighborhood", String(200), nullable=True),
    Column("hours", String(200), nullable=True),
    Column("days_closed", String(200), nullable=True),
    Column("price", String(100), nullable=True),
    *_timestamps(),
)

restaurants_table = Table(
    "restaurants",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(300), nullable=False),
    Column("url", Text, nullable=True),
    Column("address", Text, nullable=True),
    Column("neighborhood", String(200), nullable=True),
    Column("has_cocktails", Boolean, nullable=False, server_default="false"),
    Column("cuisine_type", String(200), nullable=True),
    Column("vegan_or_omni", String(100), nullable=True),
    Column("hours", String(200), nullable=True),
    Column("days_closed", String(200), nullable=True),
    Column("price_range", String(20), nullable=True),
    *_timestamps(),
)

ITEM_TABLES: dict[ItemType, Table] = {
    ItemType.FLIGHT: flights_table,
    ItemType.HOTEL: hotels_table,
    ItemType.ACTIVITY: activities_table,
    ItemType.RESTAURANT: restaurants_table,
}

# ============================================================================
# VOTES TABLE (one vote per user per item)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(100), nullable=False),
    Column("vote_type", String(20), nullable=False),  # 'upvote' or 'downvote'
    Column("item_type", String(20), nullable=False),
    Column("item_id", UUID, nullable=False),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
    UniqueConstraint("username", "item_type", "item_id", name="uq_user_item_vote"),
)

Index("idx_votes_item", votes_table.c.item_type, votes_table.c.item_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(100), nullable=False),
    Column("content", Text, nullable=False),
    Column("item_type", String(20), nullable=False),
    Column("item_id", UUID, nullable=False),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
)

Index("idx_comments_item", comments_table.c.item_type, comments_table.c.item_id)

# ============================================================================
# ONLINE USERS TABLE (presence heartbeats)
# ============================================================================
online_users_table = Table(
    "online_users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(100), nullable=False),
    Column("session_id", String(255), nullable=False, unique=True),
    Column("last_seen", TIMESTAMP, nullable=False, server_default="NOW()"),
)

Index("idx_online_users_last_seen", online_users_table.c.last_seen)
