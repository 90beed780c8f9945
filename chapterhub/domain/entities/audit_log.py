"""
AuditLog Entity

Append-only log of privileged mutations.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from ..base import utcnow


class AuditLog(SQLModel, table=True):
    """
    AuditLog entity - immutable record of privileged mutations.

    Business Rules:
    - Never updated or deleted
    - Written inside the same transaction as the mutation it records
    """

    __tablename__ = "audit_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    action: str = Field(max_length=100)
    performer_id: UUID = Field(index=True)
    target_id: Optional[UUID] = Field(default=None, index=True)
    details: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_audit_log_created_at", "created_at"),
        Index("idx_audit_log_action", "action"),
    )
