"""Create user_progress, challenge_progress and user_subscriptions tables.

Revision ID: 002
Revises: 001
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: str | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create progress tables."""
    op.create_table(
        "user_progress",
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("user_name", sa.Text(), nullable=False, server_default="User"),
        sa.Column("user_image_src", sa.Text(), nullable=False, server_default="/mascot.svg"),
        sa.Column("active_course_id", sa.Integer(), nullable=False),
        sa.Column("hearts", sa.Integer(), nullable=False, server_default="5"),
        sa.Column("points", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["active_course_id"], ["courses.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id"),
        sa.CheckConstraint("hearts >= 0 AND hearts <= 5", name="ck_user_progress_hearts"),
        sa.CheckConstraint("points >= 0", name="ck_user_progress_points"),
    )
    op.create_index(op.f("ix_user_progress_points"), "user_progress", ["points"], unique=False)

    op.create_table(
        "challenge_progress",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("challenge_id", sa.Integer(), nullable=False),
        sa.Column("completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.ForeignKeyConstraint(["challenge_id"], ["challenges.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "challenge_id", name="uq_challenge_progress_user_challenge"
        ),
    )
    op.create_index(op.f("ix_challenge_progress_id"), "challenge_progress", ["id"], unique=False)
    op.create_index(
        op.f("ix_challenge_progress_user_id"), "challenge_progress", ["user_id"], unique=False
    )
    op.create_index(
        op.f("ix_challenge_progress_challenge_id"),
        "challenge_progress",
        ["challenge_id"],
        unique=False,
    )

    op.create_table(
        "user_subscriptions",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("stripe_customer_id", sa.Text(), nullable=False),
        sa.Column("stripe_subscription_id", sa.Text(), nullable=False),
        sa.Column("stripe_price_id", sa.Text(), nullable=False),
        sa.Column("stripe_current_period_end", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
        sa.UniqueConstraint("stripe_customer_id"),
        sa.UniqueConstraint("stripe_subscription_id"),
    )
    op.create_index(op.f("ix_user_subscriptions_id"), "user_subscriptions", ["id"], unique=False)


def downgrade() -> None:
    """Drop progress tables."""
    op.drop_index(op.f("ix_user_subscriptions_id"), table_name="user_subscriptions")
    op.drop_table("user_subscriptions")
    op.drop_index(op.f("ix_challenge_progress_challenge_id"), table_name="challenge_progress")
    op.drop_index(op.f("ix_challenge_progress_user_id"), table_name="challenge_progress")
    op.drop_index(op.f("ix_challenge_progress_id"), table_name="challenge_progress")
    op.drop_table("challenge_progress")
    op.drop_index(op.f("ix_user_progress_points"), table_name="user_progress")
    op.drop_table("user_progress")
