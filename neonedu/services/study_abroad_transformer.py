"""
Study-Abroad Transformer - program rows to destination cards

The ``description`` column stores two values, "<description>|<universities>".
Rows written before the separator was introduced are split with a set of
legacy patterns instead.
"""
import re
from typing import Dict, Iterable, List, Mapping, Tuple

SEPARATOR = '|'

DEFAULT_DESCRIPTION = 'Study opportunities available'
DEFAULT_UNIVERSITIES = 'Contact us for more information'

# Trailing "universities" clauses found in legacy rows, tried in order
UNIVERSITY_PATTERNS = (
    re.compile(r'(\d+\+ universities? and colleges?)$', re.IGNORECASE),
    re.compile(r'(James Cook University[^.]*)$', re.IGNORECASE),
    re.compile(r'(Sejong University[^.]*)$', re.IGNORECASE),
    re.compile(r'(INTI international University[^.]*)$', re.IGNORECASE),
    re.compile(r'(University of Miskolc[^.]*)$', re.IGNORECASE),
)

# Whitespace after a full stop, right before a university mention
SENTENCE_BOUNDARY = re.compile(
    r'(?<=\.)\s*(?=\d+\+|James Cook|Sejong|INTI|University of)',
    re.IGNORECASE
)


def split_fields(raw: str) -> Tuple[str, str]:
    """
    Split a stored description into (description, universities) as stored

    Either part is '' when the value does not contain it; nothing is filled
    in, so the result is safe to write back.
    """
    raw = raw or ''

    if SEPARATOR in raw:
        head, tail = raw.split(SEPARATOR, 1)
        return head.strip(), tail.strip()

    for pattern in UNIVERSITY_PATTERNS:
        match = pattern.search(raw)
        if match:
            return raw[:match.start()].strip(), match.group(1)

    parts = SENTENCE_BOUNDARY.split(raw, maxsplit=1)
    if len(parts) == 2:
        return parts[0].strip(), parts[1].strip()

    return raw.strip(), ''


def split_description(raw: str) -> Tuple[str, str]:
    """
    Split a stored description into display texts

    Args:
        raw: Value of the ``description`` column

    Returns:
        Tuple of display description and universities text, never empty
    """
    description, universities = split_fields(raw)
    return description or DEFAULT_DESCRIPTION, universities or DEFAULT_UNIVERSITIES


def join_description(description: str, universities: str) -> str:
    """Inverse of :func:`split_description` for admin writes"""
    return f"{description}{SEPARATOR}{universities}"


class StudyAbroadTransformer:
    """Maps program rows to destination cards (store order is kept)"""

    COUNTRY_ASSETS = {
        'Australia': {
            'image': '/Australia Background.svg',
            'dotbg': '/australiaDots.svg'
        },
        'Singapore': {
            'image': '/Neon Edu v3 (2)/singapiore.svg',
            'dotbg': '/singapore dots.svg'
        },
        'South Korea': {
            'image': '/Neon Edu v3 (2)/korea.svg',
            'dotbg': '/korea dots.svg'
        },
        'Malaysia': {
            'image': '/Neon Edu v3 (2)/malas.svg',
            'dotbg': '/malas dots.svg'
        },
        'China': {
            'image': '/Neon Edu v3 (2)/china.svg',
            'dotbg': '/china dots.svg'
        },
        'Hungary': {
            'image': '/Neon Edu v3 (2)/hungray.svg',
            'dotbg': '/hungary dots.svg'
        },
    }

    # Unrecognized countries borrow this bundle
    FALLBACK_COUNTRY = 'China'

    @classmethod
    def country_assets(cls, country: str, fallback_country: str = None) -> Dict[str, str]:
        fallback = cls.COUNTRY_ASSETS.get(fallback_country or cls.FALLBACK_COUNTRY,
                                          cls.COUNTRY_ASSETS[cls.FALLBACK_COUNTRY])
        return cls.COUNTRY_ASSETS.get(country, fallback)

    @classmethod
    def to_display(cls, program: Mapping, fallback_country: str = None) -> Dict:
        """Map a single row to a destination card"""
        country = program.get('country') or ''
        assets = cls.country_assets(country, fallback_country)
        description, universities = split_description(program.get('description'))
        image = (program.get('image') or '').strip()

        return {
            'country': country,
            'description': description,
            'universities': universities,
            'image': image or assets['image'],
            'dotbg': assets['dotbg']
        }

    @classmethod
    def transform(cls, programs: Iterable[Mapping], fallback_country: str = None) -> List[Dict]:
        """
        Transform program rows into destination cards

        Args:
            programs: Raw rows in store (insertion) order
            fallback_country: Asset bundle used for unknown countries

        Returns:
            List of {country, description, universities, image, dotbg}
        """
        return [cls.to_display(program, fallback_country) for program in programs]

    @staticmethod
    def to_storage(data: Mapping) -> Dict:
        """Inverse transform: admin form fields to program columns"""
        return {
            'program_name': (data.get('program_name') or '').strip() or None,
            'country': (data.get('country') or '').strip(),
            'description': join_description((data.get('description') or '').strip(),
                                             (data.get('universities') or '').strip()),
            'image': (data.get('image') or '').strip() or None,
            'link': (data.get('link') or '').strip() or None
        }
