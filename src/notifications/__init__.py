"""
Notifications
=============

Optional audit sink receiving one record per analyzed review.
"""

from .sheets_logger import AuditRecord, SheetsAuditLogger

__all__ = ["AuditRecord", "SheetsAuditLogger"]
