"""Initial schema — profiles, courses, enrollments, posts, platform config, transfers.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "platform_config",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=False),
        sa.Column("owner", sa.String(128), nullable=False),
        sa.Column("fee_percentage", sa.Integer, nullable=False),
        sa.Column("next_course_id", sa.Integer, nullable=False, server_default="1"),
        sa.Column("next_post_id", sa.Integer, nullable=False, server_default="1"),
        sa.Column("total_fees_collected", sa.BigInteger, nullable=False, server_default="0"),
        sa.Column("sequence_number", sa.Integer, nullable=False, server_default="0"),
        sa.Column("deployed_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint(
            "fee_percentage >= 0 AND fee_percentage <= 100",
            name="ck_platform_fee_range",
        ),
    )

    op.create_table(
        "student_profiles",
        sa.Column("account", sa.String(128), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("completed_courses", sa.Integer, nullable=False, server_default="0"),
        sa.Column("total_spent", sa.BigInteger, nullable=False, server_default="0"),
        sa.Column("achievements", sa.JSON, nullable=False),
        sa.Column("joined_at", sa.Integer, nullable=False),
        sa.Column("preferences", sa.JSON, nullable=False),
    )

    op.create_table(
        "instructor_profiles",
        sa.Column("account", sa.String(128), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("credentials", sa.Text, nullable=False),
        sa.Column("bio", sa.Text, nullable=False),
        sa.Column("social_links", sa.JSON, nullable=False),
        sa.Column("rating", sa.Integer, nullable=False, server_default="0"),
        sa.Column("total_reviews", sa.Integer, nullable=False, server_default="0"),
        sa.Column("total_students", sa.Integer, nullable=False, server_default="0"),
        sa.Column("total_earnings", sa.BigInteger, nullable=False, server_default="0"),
        sa.CheckConstraint("total_earnings >= 0", name="ck_instructor_earnings_non_negative"),
    )

    op.create_table(
        "courses",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("instructor", sa.String(128), sa.ForeignKey("instructor_profiles.account"), nullable=False),
        sa.Column("price", sa.BigInteger, nullable=False),
        sa.Column("content_hash", sa.String(256), nullable=False),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("total_students", sa.Integer, nullable=False, server_default="0"),
        sa.Column("average_rating", sa.Integer, nullable=False, server_default="0"),
        sa.Column("total_ratings", sa.Integer, nullable=False, server_default="0"),
        sa.Column("prerequisites", sa.JSON, nullable=False),
        sa.Column("created_at", sa.Integer, nullable=False),
        sa.CheckConstraint("price >= 0", name="ck_course_price_non_negative"),
    )
    op.create_index("ix_courses_instructor", "courses", ["instructor"])

    op.create_table(
        "enrollments",
        sa.Column("student", sa.String(128), sa.ForeignKey("student_profiles.account"), primary_key=True),
        sa.Column("course_id", sa.Integer, sa.ForeignKey("courses.id"), primary_key=True),
        sa.Column("enrolled_at", sa.Integer, nullable=False),
        sa.Column("last_accessed", sa.Integer, nullable=False),
        sa.Column("completed", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("progress", sa.Integer, nullable=False, server_default="0"),
        sa.Column("rating", sa.Integer, nullable=True),
        sa.Column("completion_certificate", sa.String(256), nullable=True),
    )

    op.create_table(
        "discussion_posts",
        sa.Column("course_id", sa.Integer, sa.ForeignKey("courses.id"), primary_key=True),
        sa.Column("post_id", sa.Integer, primary_key=True, autoincrement=False),
        sa.Column("author", sa.String(128), nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("upvotes", sa.Integer, nullable=False, server_default="0"),
        sa.Column("created_at", sa.Integer, nullable=False),
    )

    op.create_table(
        "ledger_transfers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("kind", sa.String(30), nullable=False),
        sa.Column("sender", sa.String(128), nullable=False),
        sa.Column("recipient", sa.String(128), nullable=False),
        sa.Column("amount", sa.BigInteger, nullable=False),
        sa.Column("sequence_number", sa.Integer, nullable=False),
        sa.Column("executed_at", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint("amount > 0", name="ck_transfer_amount_positive"),
    )
    op.create_index(
        "ix_ledger_transfers_sequence_number", "ledger_transfers", ["sequence_number"],
    )


def downgrade() -> None:
    op.drop_index("ix_ledger_transfers_sequence_number", table_name="ledger_transfers")
    op.drop_table("ledger_transfers")
    op.drop_table("discussion_posts")
    op.drop_table("enrollments")
    op.drop_index("ix_courses_instructor", table_name="courses")
    op.drop_table("courses")
    op.drop_table("instructor_profiles")
    op.drop_table("student_profiles")
    op.drop_table("platform_config")
