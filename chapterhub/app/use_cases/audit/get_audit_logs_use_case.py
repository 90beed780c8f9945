"""
Get Audit Logs Use Case

Retrieves the audit trail with cursor-based pagination.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel

from chapterhub.app.authorization import Forbidden, require_role
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import Role
from chapterhub.libs.result import Result, Return

MAX_LIMIT = 100


class AuditLogEntry(BaseModel):
    id: UUID
    action: str
    performer_id: UUID
    performer_email: Optional[str] = None
    target_id: Optional[UUID] = None
    details: Dict[str, Any] = {}
    created_at: datetime


class AuditLogPage(BaseModel):
    logs: List[AuditLogEntry]
    next_cursor: Optional[str] = None


class GetAuditLogsUseCase:
    """
    Use case for reading the audit log.

    Business Rules:
    - SUPER_ADMIN only
    - Newest first
    - Cursor is opaque to callers (base64 ISO timestamp of the last row)
    - Each entry carries the performer's email when the user still exists
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, limit: int = 50, cursor: Optional[str] = None
    ) -> Result[AuditLogPage]:
        try:
            require_role(actor, [Role.SUPER_ADMIN])
        except Forbidden as exc:
            return Return.err(exc.error)

        limit = min(max(limit, 1), MAX_LIMIT)

        async with self.uow:
            logs, next_cursor = await self.uow.audit_logs.get_paginated(limit=limit, cursor=cursor)

            performers = {
                u.id: u
                for u in await self.uow.users.get_by_ids(list({log.performer_id for log in logs}))
            }

            entries = [
                AuditLogEntry(
                    id=log.id,
                    action=log.action,
                    performer_id=log.performer_id,
                    performer_email=performers[log.performer_id].email
                    if log.performer_id in performers
                    else None,
                    target_id=log.target_id,
                    details=log.details or {},
                    created_at=log.created_at,
                )
                for log in logs
            ]

            return Return.ok(AuditLogPage(logs=entries, next_cursor=next_cursor))
