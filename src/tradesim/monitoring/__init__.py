"""Audit logging, console notification and reports."""

from tradesim.monitoring.audit import AuditLog
from tradesim.monitoring.notifier import ConsoleNotifier, Notifier
from tradesim.monitoring.report import (
    build_report,
    format_ledger,
    format_summary,
    print_results,
    write_report,
)

__all__ = [
    "AuditLog",
    "ConsoleNotifier",
    "Notifier",
    "build_report",
    "format_ledger",
    "format_summary",
    "print_results",
    "write_report",
]
