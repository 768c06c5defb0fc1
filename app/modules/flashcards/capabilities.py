"""Id and clock capabilities injected into the importers.

These are the only sources of non-determinism in an import; tests substitute
their own.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Callable

IdFactory = Callable[[], str]
Clock = Callable[[], datetime]


def new_id() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
