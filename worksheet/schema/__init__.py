"""Schema definitions."""

from worksheet.schema.base import Entry

__all__ = ["Entry"]
