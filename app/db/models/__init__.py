from __future__ import annotations

from app.db.models.search import Search

__all__ = ["Search"]
