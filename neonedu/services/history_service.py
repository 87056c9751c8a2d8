"""
History Service - timeline entries with a static fallback
"""
from typing import Dict, Iterable, List, Mapping
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from neonedu import db
from neonedu.models.history import HistoryItem


class HistoryService:
    """Timeline for the public page and the admin history screen"""

    # Shown whenever the history table has no rows or cannot be read
    STATIC_TIMELINE = (
        {'year': 2015, 'event': 'Founded in Ulaanbaatar, Mongolia'},
        {'year': 2017, 'event': 'Began sending students to Australia'},
        {'year': 2022, 'event': 'Launched English language teaching programs'},
        {'year': 2023, 'event': 'Expanded student placements to Canada and the USA'},
        {'year': 2025, 'event': 'Added study destination in China, South Korea, Singapore, Malaysia, '
                                'and Hungary, and introduced Chinese language teaching'},
    )

    STATE_READY = 'ready'
    STATE_EMPTY = 'empty'
    STATE_NEEDS_SETUP = 'needs_setup'

    YEAR_MIN = 1900
    YEAR_MAX = 2100

    @classmethod
    def static_timeline(cls) -> List[Dict]:
        return [dict(entry) for entry in cls.STATIC_TIMELINE]

    @classmethod
    def timeline(cls, items: Iterable[Mapping]) -> List[Dict]:
        """
        Public timeline entries

        Args:
            items: History rows ordered by year then created_at

        Returns:
            The rows as {year, event}, or the static timeline when there are none
        """
        entries = [{'year': item.get('year'), 'event': item.get('event') or ''} for item in items]
        return entries or cls.static_timeline()

    @staticmethod
    def table_exists() -> bool:
        return inspect(db.engine).has_table(HistoryItem.__tablename__)

    @staticmethod
    def list_items(ascending: bool = False) -> List[HistoryItem]:
        """History rows by year (descending for the admin), created_at tiebreak"""
        if ascending:
            order = (HistoryItem.year.asc(), HistoryItem.created_at.asc())
        else:
            order = (HistoryItem.year.desc(), HistoryItem.created_at.desc())
        return HistoryItem.query.order_by(*order).all()

    @classmethod
    def admin_listing(cls) -> Dict:
        """
        History rows for the admin screen, with the table state

        Returns:
            Dict with 'state' (ready, empty or needs_setup), 'items' and 'error'
        """
        try:
            if not cls.table_exists():
                return {'state': cls.STATE_NEEDS_SETUP, 'items': [],
                        'error': f'Table "{HistoryItem.__tablename__}" does not exist'}

            items = cls.list_items(ascending=False)
        except SQLAlchemyError as e:
            db.session.rollback()
            print(f"[HistoryService] Error reading history: {e}", flush=True)
            return {'state': cls.STATE_NEEDS_SETUP, 'items': [], 'error': str(e)}

        state = cls.STATE_READY if items else cls.STATE_EMPTY
        return {'state': state, 'items': items, 'error': None}
