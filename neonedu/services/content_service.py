"""
Content Service - store access and the public display model
"""
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Dict, List, Mapping, Optional
from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from neonedu import db
from neonedu.exceptions import DuplicateError, NotFoundError
from neonedu.models.team_member import TeamMember
from neonedu.models.course import Course
from neonedu.models.study_abroad import StudyAbroadProgram
from neonedu.models.contact_info import ContactInfo, SocialLink
from neonedu.services.cache_service import cache_service
from neonedu.services.team_transformer import TeamTransformer
from neonedu.services.course_transformer import CourseTransformer
from neonedu.services.study_abroad_transformer import StudyAbroadTransformer
from neonedu.services.history_service import HistoryService

SITE_CONTENT_KEY = 'site-content'

DEFAULT_CONTACT_INFO = {
    'address': 'Ulaanbaatar, Mongolia',
    'phone': '+976-11-123456',
    'email': 'info@neonedu.com'
}

# Unique-violation messages keyed by model
DUPLICATE_MESSAGES = {
    TeamMember: 'Team member with this information already exists',
    Course: 'Course with this information already exists',
    StudyAbroadProgram: 'Study abroad program with this information already exists',
    SocialLink: 'Social media platform already exists',
}


class ContentService:
    """Row-level access to the site content tables"""

    # ---- reads ---------------------------------------------------------

    @staticmethod
    def list_rows(model, newest_first: bool = False) -> List:
        """All rows of a content table in insertion order"""
        order = model.created_at.desc() if newest_first else model.created_at.asc()
        return model.query.order_by(order).all()

    @staticmethod
    def get_or_404(model, row_id: str):
        row = db.session.get(model, row_id)
        if row is None:
            raise NotFoundError(f'{_label(model)} not found')
        return row

    # ---- writes --------------------------------------------------------

    @classmethod
    def create(cls, model, values: Mapping):
        row = model(**values)
        db.session.add(row)
        cls._commit(model)
        return row

    @classmethod
    def update(cls, model, row_id: str, values: Mapping):
        row = cls.get_or_404(model, row_id)
        for key, value in values.items():
            setattr(row, key, value)
        cls._commit(model)
        return row

    @classmethod
    def delete(cls, model, row_id: str) -> Dict:
        row = cls.get_or_404(model, row_id)
        data = row.to_dict()
        db.session.delete(row)
        cls._commit(model)
        return data

    @staticmethod
    def _commit(model):
        """Commit, translating unique violations and dropping the cached page"""
        try:
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            print(f"[ContentService] Constraint violation on {model.__tablename__}: {e.orig}", flush=True)
            raise DuplicateError(DUPLICATE_MESSAGES.get(model, str(e.orig)))
        except SQLAlchemyError:
            db.session.rollback()
            raise
        cache_service.delete(SITE_CONTENT_KEY)

    # ---- contact info --------------------------------------------------

    @staticmethod
    def find_contact_info():
        return ContactInfo.query.order_by(ContactInfo.created_at.asc()).first()

    @classmethod
    def get_or_create_contact_info(cls) -> ContactInfo:
        """The singleton contact record, created with defaults if missing"""
        contact_info = cls.find_contact_info()
        if contact_info is None:
            print("[ContentService] No contact info found, creating defaults", flush=True)
            contact_info = ContactInfo(**DEFAULT_CONTACT_INFO)
            db.session.add(contact_info)
            cls._commit(ContactInfo)
        return contact_info

    @classmethod
    def update_contact_info(cls, values: Mapping) -> ContactInfo:
        contact_info = cls.find_contact_info()
        if contact_info is None:
            contact_info = ContactInfo(**values)
            db.session.add(contact_info)
        else:
            for key, value in values.items():
                setattr(contact_info, key, value)
        cls._commit(ContactInfo)
        return contact_info

    @classmethod
    def add_social(cls, platform: str, url: str) -> SocialLink:
        contact_info = cls.find_contact_info()
        if contact_info is None:
            raise NotFoundError('Contact info not found. Please create contact info first.')

        social = SocialLink(contact_info_id=contact_info.id, platform=platform, url=url)
        db.session.add(social)
        cls._commit(SocialLink)
        return social

    @classmethod
    def remove_social(cls, social_id: str) -> Dict:
        social = db.session.get(SocialLink, social_id)
        if social is None:
            raise NotFoundError('Social media link not found')
        data = social.to_dict()
        db.session.delete(social)
        cls._commit(SocialLink)
        return data


def _label(model) -> str:
    return {
        TeamMember: 'Team member',
        Course: 'Course',
        StudyAbroadProgram: 'Study abroad program',
    }.get(model, model.__name__)


# ---- public display model ---------------------------------------------

def fetch_team_members() -> List[Dict]:
    return [row.to_dict() for row in ContentService.list_rows(TeamMember)]


def fetch_courses() -> List[Dict]:
    return [row.to_dict() for row in ContentService.list_rows(Course)]


def fetch_study_abroad_programs() -> List[Dict]:
    return [row.to_dict() for row in ContentService.list_rows(StudyAbroadProgram)]


def fetch_history() -> List[Dict]:
    return [row.to_dict() for row in HistoryService.list_items(ascending=True)]


def fetch_contact_info() -> List[Dict]:
    contact_info = ContentService.find_contact_info()
    return [contact_info.to_dict()] if contact_info else []


FETCHERS = {
    'team': fetch_team_members,
    'courses': fetch_courses,
    'study_abroad': fetch_study_abroad_programs,
    'history': fetch_history,
    'contact': fetch_contact_info,
}


def contact_display(rows: List[Mapping]) -> Optional[Dict]:
    """Footer contact block, or None when there is no contact record"""
    if not rows:
        return None
    contact_info = rows[0]
    return {
        'address': contact_info.get('address') or '',
        'phone': contact_info.get('phone') or '',
        'email': contact_info.get('email') or '',
        'socials': [
            {'platform': social.get('platform'), 'url': social.get('url')}
            for social in contact_info.get('contact_info_socials') or []
        ],
    }


def build_display_model(raw: Mapping[str, List], fallback_country: str = None) -> Dict:
    """
    Transform raw rows into everything the home page renders

    Args:
        raw: Rows keyed by section (team, courses, study_abroad, history, contact)
        fallback_country: Asset bundle for unrecognized countries

    Returns:
        Display model keyed by section
    """
    return {
        'team': TeamTransformer.transform(raw.get('team') or []),
        'courses': CourseTransformer.transform(raw.get('courses') or []),
        'study_abroad': StudyAbroadTransformer.transform(raw.get('study_abroad') or [],
                                                         fallback_country=fallback_country),
        'history': HistoryService.timeline(raw.get('history') or []),
        'contact': contact_display(raw.get('contact') or []),
    }


def _fetch_in_context(app, name, fetcher):
    """Run one fetch in its own app context; failures yield an empty section"""
    with app.app_context():
        try:
            return fetcher()
        except Exception as e:
            db.session.rollback()
            print(f"[ContentService] Error fetching {name}: {e}", flush=True)
            return []


def fetch_raw_content(app=None) -> Dict[str, List]:
    """
    Fetch every section concurrently within PUBLIC_FETCH_TIMEOUT

    When the deadline passes, every section comes back empty so the page
    still renders.
    """
    app = app or current_app._get_current_object()
    timeout = app.config['PUBLIC_FETCH_TIMEOUT']
    workers = app.config.get('PUBLIC_FETCH_WORKERS', len(FETCHERS))

    executor = ThreadPoolExecutor(max_workers=workers)
    try:
        futures = {
            executor.submit(_fetch_in_context, app, name, fetcher): name
            for name, fetcher in FETCHERS.items()
        }
        done, not_done = wait(futures, timeout=timeout)
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

    if not_done:
        print(f"[ContentService] Database timeout after {timeout}s, rendering empty sections", flush=True)
        return {name: [] for name in FETCHERS}

    return {futures[future]: future.result() for future in done}


def load_site_content(app=None) -> Dict:
    """Display model for the home page, served from cache when possible"""
    app = app or current_app._get_current_object()

    cached = cache_service.get(SITE_CONTENT_KEY)
    if cached is not None:
        return cached

    raw = fetch_raw_content(app)
    content = build_display_model(raw, fallback_country=app.config.get('FALLBACK_COUNTRY'))

    # Do not pin a degraded page in the cache
    if any(raw.values()):
        cache_service.set(SITE_CONTENT_KEY, content, app.config.get('CACHE_TTL', 300))
    return content
