"""
Course Transformer - raw course rows to the course section display model

Older course rows only carry a free-text ``description`` such as
"4 months course. Levels: Beginner, Intermediate"; newer rows fill the
explicit ``duration``/``levelitem1``/``levelitem2`` columns. Every display
field is resolved through an ordered chain of strategies, each returning
``None`` to fall through to the next one, ending in a fixed default.
"""
import re
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence
from neonedu.services.ordering import ordered_by

Strategy = Callable[[Mapping], Optional[str]]

DURATION_PATTERN = re.compile(r'\d+ months')
# "Intermediate" on its own, not the tail of "Upper Intermediate"
STANDALONE_INTERMEDIATE = re.compile(r'(?<!Upper )Intermediate')


def _text(value) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def explicit(column: str) -> Strategy:
    """Use a column as-is when it is filled in"""
    def strategy(course: Mapping) -> Optional[str]:
        return _text(course.get(column))
    return strategy


def description_contains(term: str) -> Strategy:
    """Yield ``term`` when the legacy description mentions it"""
    def strategy(course: Mapping) -> Optional[str]:
        return term if term in (course.get('description') or '') else None
    return strategy


def description_matches(pattern, value: str = None) -> Strategy:
    """Yield the regex match (or a fixed value) from the legacy description"""
    def strategy(course: Mapping) -> Optional[str]:
        match = pattern.search(course.get('description') or '')
        if not match:
            return None
        return value if value is not None else match.group(0)
    return strategy


def mapped(column: str, table: Mapping[str, str]) -> Strategy:
    """Look a column up in a static asset map"""
    def strategy(course: Mapping) -> Optional[str]:
        return table.get(_text(course.get(column)) or '')
    return strategy


def default(value: str) -> Strategy:
    def strategy(course: Mapping) -> Optional[str]:
        return value
    return strategy


def resolve(course: Mapping, strategies: Sequence[Strategy]) -> str:
    """Return the first non-empty strategy result"""
    for strategy in strategies:
        value = strategy(course)
        if value:
            return value
    return ''


class CourseTransformer:
    """Maps course rows to course cards in a fixed display order"""

    COURSE_ORDER = (
        'General English',
        'IELTS Preparation',
        'Academic English',
    )

    DEFAULT_DURATION = '4 months'
    DEFAULT_LEVEL_ITEM1 = 'Research methodology'
    DEFAULT_LEVEL_ITEM2 = 'Academic writing'
    DEFAULT_IMAGE = '/office.svg'

    COURSE_IMAGES = {
        'General English': '/classroom2.svg',
        'IELTS Preparation': '/classroom1.png',
        'Academic English': '/office.svg',
    }

    DURATION_CHAIN = (
        explicit('duration'),
        description_matches(DURATION_PATTERN),
        default(DEFAULT_DURATION),
    )

    IMAGE_CHAIN = (
        explicit('image'),
        mapped('title', COURSE_IMAGES),
        mapped('category', COURSE_IMAGES),
        default(DEFAULT_IMAGE),
    )

    LEVEL_ITEM1_CHAIN = (
        explicit('levelitem1'),
        description_contains('Beginner'),
        description_contains('Upper Intermediate'),
        default(DEFAULT_LEVEL_ITEM1),
    )

    LEVEL_ITEM2_CHAIN = (
        explicit('levelitem2'),
        description_matches(STANDALONE_INTERMEDIATE, 'Intermediate'),
        description_contains('Advanced'),
        default(DEFAULT_LEVEL_ITEM2),
    )

    @classmethod
    def to_display(cls, course: Mapping) -> Dict:
        """Map a single row to a course card"""
        return {
            'name': course.get('title') or '',
            'duration': resolve(course, cls.DURATION_CHAIN),
            'image': resolve(course, cls.IMAGE_CHAIN),
            'levelItem1': resolve(course, cls.LEVEL_ITEM1_CHAIN),
            'levelItem2': resolve(course, cls.LEVEL_ITEM2_CHAIN)
        }

    @classmethod
    def transform(cls, courses: Iterable[Mapping]) -> List[Dict]:
        """
        Transform course rows into ordered course cards

        Args:
            courses: Raw rows as returned by the store

        Returns:
            List of {name, duration, image, levelItem1, levelItem2}
        """
        cards = [cls.to_display(course) for course in courses]
        order = ordered_by(cls.COURSE_ORDER)
        return sorted(cards, key=lambda card: order(card['name']))

    @staticmethod
    def encode_description(duration: str, levelitem1: str, levelitem2: str) -> str:
        """Legacy description text for rows written by the admin panel"""
        return f"{duration} - {levelitem1}, {levelitem2}"

    @classmethod
    def to_storage(cls, data: Mapping, placeholder_link: str) -> Dict:
        """
        Inverse transform: admin form fields to course columns

        The explicit columns are written alongside the encoded description,
        which is kept only so older readers still find duration and levels.
        """
        duration = (data.get('duration') or '').strip()
        levelitem1 = (data.get('levelitem1') or '').strip()
        levelitem2 = (data.get('levelitem2') or '').strip()
        return {
            'title': (data.get('title') or '').strip(),
            'description': cls.encode_description(duration, levelitem1, levelitem2),
            'duration': duration,
            'levelitem1': levelitem1,
            'levelitem2': levelitem2,
            'image': (data.get('image') or '').strip() or None,
            'category': duration,
            'link': placeholder_link
        }
