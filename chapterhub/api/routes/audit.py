"""
Audit API Routes
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from chapterhub.api.error import raise_for_error
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.app.use_cases.audit import AuditLogPage, GetAuditLogsUseCase
from chapterhub.depends import get_current_actor, get_unit_of_work
from chapterhub.domain.actor import Actor

router = APIRouter(prefix="/audit-logs", tags=["Audit"])


@router.get("", status_code=status.HTTP_200_OK, response_model=AuditLogPage)
async def get_audit_logs(
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(50, ge=1, le=100, description="Maximum number of logs to return"),
    cursor: Optional[str] = Query(None, description="Pagination cursor"),
):
    """
    Get Audit Logs

    Returns privileged mutations, newest first. SUPER_ADMIN only.

    Returns:
        - logs: audit entries
        - next_cursor: Cursor for next page (null if no more logs)
    """
    result = await GetAuditLogsUseCase(uow).execute(actor, limit=limit, cursor=cursor)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
