# app/models/base.py
import uuid
from datetime import datetime, timezone


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Naive UTC timestamp, the form every DateTime column is stored in"""
    return datetime.now(timezone.utc).replace(tzinfo=None)
