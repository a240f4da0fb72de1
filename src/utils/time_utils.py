# src/utils/time_utils.py
from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """timezone 정보가 포함된 현재 UTC 시각을 반환합니다."""
    return datetime.now(timezone.utc)


def as_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    naive datetime을 UTC로 간주해 aware datetime으로 변환합니다.
    SQLite는 timezone 정보를 보존하지 않으므로, DB에서 읽은 시각을 비교하기 전에 사용합니다.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
