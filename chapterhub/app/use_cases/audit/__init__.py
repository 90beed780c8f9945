from .get_audit_logs_use_case import AuditLogEntry, AuditLogPage, GetAuditLogsUseCase

__all__ = ["AuditLogEntry", "AuditLogPage", "GetAuditLogsUseCase"]
