"""
Core package for tripbook, a personal solo-travel organizer.

Storage lives in tripbook.db, input forms and value objects in
tripbook.models, and the calendar, expense and trip arithmetic in
tripbook.services.
"""

__all__: list[str] = []
