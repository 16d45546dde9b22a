"""initial_schema

Create the trip planner schema:
- Users (seeded, name + PIN hash)
- Flights, hotels, activities, restaurants (one table per item type)
- Votes (one per user per item, upvote or downvote)
- Comments (flat, per item)
- Online users (presence heartbeats, one row per browser session)

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-19 10:12:04.511203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _timestamp_columns() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _id_column(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("pin_hash", sa.String(64), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_user_name"),
    )

    # ========================================================================
    # ITEM tables
    # ========================================================================
    op.create_table(
        "flights",
        _id_column(),
        sa.Column("traveler_name", sa.String(200), nullable=False),
        sa.Column("airline", sa.String(200), nullable=True),
        sa.Column("price_3_night", sa.Float(), nullable=True),
        sa.Column("price_4_night", sa.Float(), nullable=True),
        sa.Column("inbound_flight", sa.Text(), nullable=True),
        sa.Column("outbound_flight", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "hotels",
        _id_column(),
        sa.Column("name", sa.String(300), nullable=False),
        sa.Column("url", sa.Text(), nullable=True),
        sa.Column("total_price", sa.Float(), nullable=False, server_default="0"),
        sa.Column("per_person", sa.Float(), nullable=False, server_default="0"),
        sa.Column("includes", sa.Text(), nullable=True),
        sa.Column("neighborhood", sa.String(200), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("price_3_night_tay", sa.Float(), nullable=True),
        sa.Column("price_3_night_scar", sa.Float(), nullable=True),
        sa.Column("price_4_night_tay", sa.Float(), nullable=True),
        sa.Column("price_4_night_scar", sa.Float(), nullable=True),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_hotels_per_person", "hotels", ["per_person"])

    op.create_table(
        "activities",
        _id_column(),
        sa.Column("name", sa.String(300), nullable=False),
        sa.Column("url", sa.Text(), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("neighborhood", sa.String(200), nullable=True),
        sa.Column("hours", sa.String(200), nullable=True),
        sa.Column("days_closed", sa.String(200), nullable=True),
        sa.Column("price", sa.String(100), nullable=True),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "restaurants",
        _id_column(),
        sa.Column("name", sa.String(300), nullable=False),
        sa.Column("url", sa.Text(), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("neighborhood", sa.String(200), nullable=True),
        sa.Column(
            "has_cocktails", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("cuisine_type", sa.String(200), nullable=True),
        sa.Column("vegan_or_omni", sa.String(100), nullable=True),
        sa.Column("hours", sa.String(200), nullable=True),
        sa.Column("days_closed", sa.String(200), nullable=True),
        sa.Column("price_range", sa.String(20), nullable=True),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        _id_column(),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("vote_type", sa.String(20), nullable=False),
        sa.Column("item_type", sa.String(20), nullable=False),
        sa.Column("item_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "username", "item_type", "item_id", name="uq_user_item_vote"
        ),
        sa.CheckConstraint(
            "vote_type IN ('upvote', 'downvote')", name="ck_vote_type"
        ),
    )
    op.create_index("idx_votes_item", "votes", ["item_type", "item_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        _id_column(),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("item_type", sa.String(20), nullable=False),
        sa.Column("item_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_comments_item", "comments", ["item_type", "item_id"])

    # ========================================================================
    # ONLINE_USERS table
    # ========================================================================
    op.create_table(
        "online_users",
        _id_column(),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("session_id", sa.String(255), nullable=False),
        sa.Column(
            "last_seen",
            sa.TIMESTAMP(),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("session_id", name="uq_online_user_session"),
    )
    op.create_index("idx_online_users_last_seen", "online_users", ["last_seen"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("online_users")
    op.drop_table("comments")
    op.drop_table("votes")
    op.drop_table("restaurants")
    op.drop_table("activities")
    op.drop_table("hotels")
    op.drop_table("flights")
    op.drop_table("users")
