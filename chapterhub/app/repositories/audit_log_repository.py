from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from chapterhub.domain.entities import AuditAction, AuditLog


class IAuditLogRepository(ABC):
    """AuditLog repository interface - application layer"""

    @abstractmethod
    async def record(
        self,
        action: AuditAction,
        performer_id: UUID,
        target_id: Optional[UUID] = None,
        details: Optional[dict] = None,
    ) -> AuditLog:
        """Append an audit row (immutable)"""
        pass

    @abstractmethod
    async def get_paginated(
        self, limit: int = 50, cursor: Optional[str] = None
    ) -> Tuple[List[AuditLog], Optional[str]]:
        """
        Get audit logs with cursor-based pagination.

        Returns:
            Tuple of (logs list, next_cursor)
            - logs: List of audit logs ordered by created_at DESC
            - next_cursor: Cursor for next page, None if no more logs
        """
        pass
