"""Operation Registry — explicit name -> function mapping for every mutating operation.

Invariants:
    - Every mutating operation is listed here; hosts look operations up by name
    - Every function has the signature (tx, caller, *args) and raises ElearnError
      before writing anything

Design Decisions:
    - Explicit dict over getattr: every mapping visible in one place
      (ADR: ExMA no convention-over-config)
"""

from typing import Callable

from elearn.core import catalog, enrollment, forum, platform, profiles, settlement

OPERATIONS: dict[str, Callable[..., object]] = {
    # Identity & profiles
    "create_student_profile": profiles.create_student_profile,
    "update_student_preferences": profiles.update_student_preferences,
    "create_instructor_profile": profiles.create_instructor_profile,
    "award_achievement": profiles.award_achievement,

    # Catalog
    "create_course": catalog.create_course,
    "update_course": catalog.update_course,
    "set_course_active": catalog.set_course_active,

    # Enrollment & certification
    "enroll_in_course": enrollment.enroll_in_course,
    "update_progress": enrollment.update_progress,
    "complete_course": enrollment.complete_course,
    "generate_certificate": enrollment.generate_certificate,
    "rate_course": enrollment.rate_course,

    # Settlement
    "withdraw_earnings": settlement.withdraw_earnings,

    # Forum
    "create_discussion_post": forum.create_discussion_post,
    "upvote_post": forum.upvote_post,

    # Platform
    "set_platform_fee": platform.set_platform_fee,
}


def get_operation(name: str) -> Callable[..., object]:
    try:
        return OPERATIONS[name]
    except KeyError:
        raise KeyError(f"Unknown operation '{name}'") from None
