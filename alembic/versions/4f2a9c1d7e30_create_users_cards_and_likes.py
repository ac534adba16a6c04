"""Create users, cards and card_likes

Revision ID: 4f2a9c1d7e30
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4f2a9c1d7e30"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=24), primary_key=True),
        sa.Column("name", sa.String(length=30), nullable=False),
        sa.Column("about", sa.String(length=30), nullable=False),
        sa.Column("avatar", sa.String(length=2048), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "cards",
        sa.Column("id", sa.String(length=24), primary_key=True),
        sa.Column("name", sa.String(length=30), nullable=False),
        sa.Column("link", sa.String(length=2048), nullable=False),
        sa.Column("owner_id", sa.String(length=24), sa.ForeignKey("users.id"), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_cards_owner_id", "cards", ["owner_id"])

    op.create_table(
        "card_likes",
        sa.Column("card_id", sa.String(length=24), sa.ForeignKey("cards.id"), primary_key=True),
        sa.Column("user_id", sa.String(length=24), sa.ForeignKey("users.id"), primary_key=True),
    )


def downgrade() -> None:
    op.drop_table("card_likes")
    op.drop_index("ix_cards_owner_id", table_name="cards")
    op.drop_table("cards")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
