"""Column helpers shared by every model."""

import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, String


def new_id() -> str:
    return str(uuid.uuid4())


def id_column() -> Column:
    return Column(String(36), primary_key=True, default=new_id)


def created_at_column() -> Column:
    return Column(DateTime, default=datetime.utcnow, nullable=False)
