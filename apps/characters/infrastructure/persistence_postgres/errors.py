"""Storage error classification.

드라이버별 오류 코드를 해석하는 유일한 경계입니다.
"""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

# PostgreSQL SQLSTATE: unique_violation
UNIQUE_VIOLATION_SQLSTATE = "23505"


def _sqlstate(error: BaseException | None) -> str | None:
    if error is None:
        return None
    return getattr(error, "sqlstate", None) or getattr(error, "pgcode", None)


def is_unique_violation(error: IntegrityError) -> bool:
    """IntegrityError가 고유 제약 위반인지 판단합니다.

    asyncpg 어댑터는 원본 예외를 __cause__로 보존하므로 둘 다 확인합니다.
    """
    orig = error.orig
    sqlstate = _sqlstate(orig) or _sqlstate(getattr(orig, "__cause__", None))
    return sqlstate == UNIQUE_VIOLATION_SQLSTATE


def violated_constraint(error: IntegrityError) -> str | None:
    """위반된 제약 이름 (드라이버가 제공하는 경우)."""
    orig = error.orig
    for candidate in (orig, getattr(orig, "__cause__", None)):
        name = getattr(candidate, "constraint_name", None)
        if name:
            return name
    return None
