"""paths and analytics_events baseline

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "paths",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("owner_id", sa.String(256), nullable=False),
        sa.Column("start_lat", sa.Float(), nullable=False),
        sa.Column("start_lng", sa.Float(), nullable=False),
        sa.Column("end_lat", sa.Float(), nullable=False),
        sa.Column("end_lng", sa.Float(), nullable=False),
        sa.Column(
            "algorithm",
            sa.Enum("astar", "dijkstra", "bfs", name="algorithmid"),
            nullable=False,
        ),
        sa.Column("path", sa.JSON(), nullable=False),
        sa.Column("distance", sa.Float(), nullable=False),
        sa.Column("duration_ms", sa.Integer(), nullable=False),
        sa.Column("options", sa.JSON(), nullable=False),
        sa.Column("metadata", sa.JSON(), nullable=False),
        sa.Column("is_public", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_paths_owner_id", "paths", ["owner_id"])
    op.create_index("ix_paths_owner_created", "paths", ["owner_id", "created_at"])

    op.create_table(
        "analytics_events",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("owner_id", sa.String(256), nullable=False),
        sa.Column("type", sa.String(64), nullable=False),
        sa.Column("algorithm", sa.String(32), nullable=False),
        sa.Column("duration_ms", sa.Integer(), nullable=False),
        sa.Column("distance", sa.Float(), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_analytics_events_timestamp", "analytics_events", ["timestamp"])
    op.create_index(
        "ix_analytics_owner_timestamp", "analytics_events", ["owner_id", "timestamp"]
    )


def downgrade() -> None:
    op.drop_index("ix_analytics_owner_timestamp", table_name="analytics_events")
    op.drop_index("ix_analytics_events_timestamp", table_name="analytics_events")
    op.drop_table("analytics_events")
    op.drop_index("ix_paths_owner_created", table_name="paths")
    op.drop_index("ix_paths_owner_id", table_name="paths")
    op.drop_table("paths")
