"""
Initial tracking schema: tags, readers, assets, events

Revision ID: 0001_tracking
Revises:
Create Date: 2026-10-01 00:00:00
"""

from alembic import op
import sqlalchemy as sa

revision = "0001_tracking"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "tags",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("tag", sa.String(length=256), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=False), nullable=False),
        sa.UniqueConstraint("tag", name="uq_tags_tag"),
    )

    op.create_table(
        "readers",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("reader", sa.String(length=256), nullable=False),
        sa.Column("name", sa.String(length=512), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=False), nullable=False),
        sa.UniqueConstraint("reader", name="uq_readers_reader"),
    )

    op.create_table(
        "assets",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=512), nullable=True),
        sa.Column(
            "tag_id",
            sa.String(length=36),
            sa.ForeignKey("tags.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column(
            "current_reader_id",
            sa.String(length=36),
            sa.ForeignKey("readers.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("created_at", sa.DateTime(timezone=False), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=False), nullable=False),
        sa.UniqueConstraint("tag_id", name="uq_assets_tag_id"),
    )
    op.create_index("ix_assets_current_reader_id", "assets", ["current_reader_id"])

    op.create_table(
        "events",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("tag", sa.String(length=256), nullable=False),
        sa.Column("reader", sa.String(length=256), nullable=False),
        sa.Column(
            "asset_id",
            sa.String(length=36),
            sa.ForeignKey("assets.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column(
            "reader_id",
            sa.String(length=36),
            sa.ForeignKey("readers.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("created_at", sa.DateTime(timezone=False), nullable=False),
    )
    op.create_index("ix_events_tag", "events", ["tag"])
    op.create_index("ix_events_reader", "events", ["reader"])
    op.create_index("ix_events_asset_id_created_at", "events", ["asset_id", "created_at"])


def downgrade() -> None:
    op.drop_index("ix_events_asset_id_created_at", table_name="events")
    op.drop_index("ix_events_reader", table_name="events")
    op.drop_index("ix_events_tag", table_name="events")
    op.drop_table("events")

    op.drop_index("ix_assets_current_reader_id", table_name="assets")
    op.drop_table("assets")

    op.drop_table("readers")
    op.drop_table("tags")
