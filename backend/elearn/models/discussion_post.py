"""DiscussionPost ORM — forum post scoped to a course.

Invariants:
    - (course_id, post_id) is the composite primary key
    - post_id comes from the global platform_config.next_post_id counter
"""

from sqlalchemy import String, Text, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from elearn.db.base import Base


class DiscussionPostRow(Base):
    """Discussion post."""
    __tablename__ = "discussion_posts"

    course_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("courses.id"), primary_key=True,
    )
    post_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False,
    )
    author: Mapped[str] = mapped_column(String(128), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    upvotes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[int] = mapped_column(Integer, nullable=False)
