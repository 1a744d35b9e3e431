from theater.services.renderer import render, usd
from theater.services.statement_service import StatementService, build_statement

__all__ = ["StatementService", "build_statement", "render", "usd"]
