"""
Utils Package
"""
from edu_portal.utils.helpers import (
    now_utc,
    now_millis,
    from_epoch_millis,
    to_local_time,
    isoformat_or_none
)

__all__ = [
    'now_utc',
    'now_millis',
    'from_epoch_millis',
    'to_local_time',
    'isoformat_or_none'
]
