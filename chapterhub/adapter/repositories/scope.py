from sqlalchemy import false

from chapterhub.app.authorization.scope import ScopeFilter


def apply_scope(stmt, model, scope: ScopeFilter):
    """Translate a ScopeFilter into WHERE clauses on ``model``"""
    if scope.match_nothing:
        return stmt.where(false())
    for field, value in scope.conditions:
        stmt = stmt.where(getattr(model, field) == value)
    return stmt


def like_pattern(search: str) -> str:
    escaped = search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped.lower()}%"
