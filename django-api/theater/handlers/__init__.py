from theater.handlers.views import StatementView

__all__ = ["StatementView"]
