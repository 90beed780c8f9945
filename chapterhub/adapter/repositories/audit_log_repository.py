import base64
from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from chapterhub.app.repositories.audit_log_repository import IAuditLogRepository
from chapterhub.domain.entities import AuditAction, AuditLog


class AuditLogRepository(IAuditLogRepository):
    """AuditLog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def record(
        self,
        action: AuditAction,
        performer_id: UUID,
        target_id: Optional[UUID] = None,
        details: Optional[dict] = None,
    ) -> AuditLog:
        """Append an audit row (immutable)"""
        audit_log = AuditLog(
            action=action.value,
            performer_id=performer_id,
            target_id=target_id,
            details=details,
        )
        self.session.add(audit_log)
        await self.session.flush()
        await self.session.refresh(audit_log)
        return audit_log

    async def get_paginated(
        self, limit: int = 50, cursor: Optional[str] = None
    ) -> Tuple[List[AuditLog], Optional[str]]:
        """
        Get audit logs with cursor-based pagination.

        Cursor format: base64-encoded ISO timestamp of created_at
        """
        stmt = select(AuditLog)

        if cursor:
            try:
                cursor_timestamp_str = base64.b64decode(cursor).decode("utf-8")
                cursor_timestamp = datetime.fromisoformat(cursor_timestamp_str)
                stmt = stmt.where(AuditLog.created_at < cursor_timestamp)
            except (ValueError, TypeError):
                # Invalid cursor, start from the newest row
                pass

        stmt = stmt.order_by(AuditLog.created_at.desc()).limit(limit + 1)

        result = await self.session.exec(stmt)
        logs = list(result.all())

        has_more = len(logs) > limit
        if has_more:
            logs = logs[:limit]

        next_cursor = None
        if has_more and logs:
            cursor_timestamp_str = logs[-1].created_at.isoformat()
            next_cursor = base64.b64encode(cursor_timestamp_str.encode("utf-8")).decode("utf-8")

        return logs, next_cursor
