"""
Structured logging for Balance View.

JSON logs with timestamp, level, event_type and per-call context.
"""

from balance_view.view_logging.logger import bind_transaction, get_logger

__all__ = ["bind_transaction", "get_logger"]
