"""
REST API routes

Every response uses the envelope {success, data?, message?, error?, count?}.
Reads are public; writes need an admin session.
"""
from flask import jsonify, request, current_app
from sqlalchemy.exc import SQLAlchemyError
from neonedu.api import api_bp
from neonedu.auth.routes import api_admin_required
from neonedu.admin.forms import (TeamMemberForm, CourseForm, StudyAbroadForm, HistoryForm,
                                 ContactInfoForm, SocialLinkForm, form_from_payload, first_error)
from neonedu.exceptions import ContentError, ValidationError
from neonedu.models.team_member import TeamMember
from neonedu.models.course import Course
from neonedu.models.study_abroad import StudyAbroadProgram
from neonedu.models.history import HistoryItem
from neonedu.services.content_service import ContentService, load_site_content
from neonedu.services.course_transformer import CourseTransformer
from neonedu.services.study_abroad_transformer import StudyAbroadTransformer, SEPARATOR, split_fields
from neonedu.services.history_service import HistoryService
from neonedu.services.media_service import MediaService


# ---- helpers -----------------------------------------------------------

def _ok(data=None, message=None, status=200, count=None):
    body = {'success': True}
    if message:
        body['message'] = message
    if count is not None:
        body['count'] = count
    if data is not None:
        body['data'] = data
    return jsonify(body), status


def _fail(message, status=500, error=None):
    body = {'success': False, 'message': message}
    if error:
        body['error'] = error
    return jsonify(body), status


def _content_error(e: ContentError):
    return _fail(e.message, e.status_code)


def _store_error(message, e: Exception):
    print(f"[API] {message}: {e}", flush=True)
    return _fail(message, 500, str(e))


def _payload():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


def _validated(form_class, payload):
    """Run the admin form's checks over a JSON payload"""
    form = form_from_payload(form_class, payload)
    if not form.validate():
        raise ValidationError(first_error(form), form.errors)
    return form


# ---- per-entity payload handling --------------------------------------

def _team_values(payload):
    _validated(TeamMemberForm, payload)
    return {key: (payload.get(key) or '').strip() for key in ('name', 'role', 'image', 'bio')}


def _team_view(member):
    return member.to_dict()


def _course_values(payload):
    _validated(CourseForm, payload)
    values = CourseTransformer.to_storage(payload, current_app.config['COURSE_PLACEHOLDER_LINK'])
    # Explicit legacy columns from API clients win over the derived ones
    for key in ('description', 'category', 'link'):
        if (payload.get(key) or '').strip():
            values[key] = payload[key].strip()
    return values


def _course_view(course):
    # Legacy columns are re-derived from the explicit ones on every update
    return {key: getattr(course, key) for key in ('title', 'duration', 'levelitem1', 'levelitem2', 'image')}


def _program_payload(payload, legacy: bool = True):
    """
    Accept both split fields and an already-joined description

    Without ``legacy`` only a "|"-joined description is split, so a
    partial update that sends a plain description keeps the stored
    universities text.
    """
    description = payload.get('description')
    if 'universities' in payload or not isinstance(description, str) or not description:
        return payload
    if not legacy and SEPARATOR not in description:
        return payload

    description, universities = split_fields(description)
    return dict(payload, description=description, universities=universities)


def _program_values(payload):
    payload = _program_payload(payload)
    _validated(StudyAbroadForm, payload)
    return StudyAbroadTransformer.to_storage(payload)


def _program_view(program):
    view = program.to_dict()
    view['description'], view['universities'] = split_fields(program.description)
    return view


ENTITIES = {
    TeamMember: ('Team member', 'team members', _team_values, _team_view),
    Course: ('Course', 'courses', _course_values, _course_view),
    StudyAbroadProgram: ('Study abroad program', 'study abroad programs', _program_values, _program_view),
}


def _list(model):
    plural = ENTITIES[model][1]
    try:
        rows = ContentService.list_rows(model, newest_first=True)
    except SQLAlchemyError as e:
        return _store_error(f'Error fetching {plural}', e)
    return _ok([row.to_dict() for row in rows], count=len(rows))


def _get(model, row_id):
    label = ENTITIES[model][0]
    try:
        row = ContentService.get_or_404(model, row_id)
    except ContentError as e:
        return _content_error(e)
    except SQLAlchemyError as e:
        return _store_error(f'Error fetching {label.lower()}', e)
    return _ok(row.to_dict())


def _create(model):
    label, _, values_for, _ = ENTITIES[model]
    try:
        row = ContentService.create(model, values_for(_payload()))
    except ContentError as e:
        return _content_error(e)
    except SQLAlchemyError as e:
        return _store_error(f'Error creating {label.lower()}', e)
    return _ok(row.to_dict(), message=f'{label} created successfully', status=201)


def _update(model, row_id):
    label, _, values_for, view_of = ENTITIES[model]
    try:
        row = ContentService.get_or_404(model, row_id)
        payload = _payload()
        if model is StudyAbroadProgram:
            payload = _program_payload(payload, legacy=False)
        # Partial updates: unspecified fields keep their stored values
        merged = dict(view_of(row), **payload)
        row = ContentService.update(model, row_id, values_for(merged))
    except ContentError as e:
        return _content_error(e)
    except SQLAlchemyError as e:
        return _store_error(f'Error updating {label.lower()}', e)
    return _ok(row.to_dict(), message=f'{label} updated successfully')


def _delete(model, row_id):
    label = ENTITIES[model][0]
    try:
        data = ContentService.delete(model, row_id)
    except ContentError as e:
        return _content_error(e)
    except SQLAlchemyError as e:
        return _store_error(f'Error deleting {label.lower()}', e)
    return _ok(data, message=f'{label} deleted successfully')


# ---- team members ------------------------------------------------------

@api_bp.route('/team-members', methods=['GET'])
def list_team_members():
    return _list(TeamMember)


@api_bp.route('/team-members', methods=['POST'])
@api_admin_required
def create_team_member():
    return _create(TeamMember)


@api_bp.route('/team-members/<member_id>', methods=['GET'])
def get_team_member(member_id):
    return _get(TeamMember, member_id)


@api_bp.route('/team-members/<member_id>', methods=['PUT'])
@api_admin_required
def update_team_member(member_id):
    return _update(TeamMember, member_id)


@api_bp.route('/team-members/<member_id>', methods=['DELETE'])
@api_admin_required
def delete_team_member(member_id):
    return _delete(TeamMember, member_id)


# ---- courses -----------------------------------------------------------

@api_bp.route('/courses', methods=['GET'])
def list_courses():
    return _list(Course)


@api_bp.route('/courses', methods=['POST'])
@api_admin_required
def create_course():
    return _create(Course)


@api_bp.route('/courses/<course_id>', methods=['GET'])
def get_course(course_id):
    return _get(Course, course_id)


@api_bp.route('/courses/<course_id>', methods=['PUT'])
@api_admin_required
def update_course(course_id):
    return _update(Course, course_id)


@api_bp.route('/courses/<course_id>', methods=['DELETE'])
@api_admin_required
def delete_course(course_id):
    return _delete(Course, course_id)


# ---- study abroad ------------------------------------------------------

@api_bp.route('/study-abroad', methods=['GET'])
def list_study_abroad():
    return _list(StudyAbroadProgram)


@api_bp.route('/study-abroad', methods=['POST'])
@api_admin_required
def create_study_abroad():
    return _create(StudyAbroadProgram)


@api_bp.route('/study-abroad/<program_id>', methods=['GET'])
def get_study_abroad(program_id):
    return _get(StudyAbroadProgram, program_id)


@api_bp.route('/study-abroad/<program_id>', methods=['PUT'])
@api_admin_required
def update_study_abroad(program_id):
    return _update(StudyAbroadProgram, program_id)


@api_bp.route('/study-abroad/<program_id>', methods=['DELETE'])
@api_admin_required
def delete_study_abroad(program_id):
    return _delete(StudyAbroadProgram, program_id)


# ---- history -----------------------------------------------------------

@api_bp.route('/history', methods=['GET'])
def list_history():
    listing = HistoryService.admin_listing()
    if listing['state'] == HistoryService.STATE_NEEDS_SETUP:
        return _fail('History table not found. Run the database setup first.', 503, listing['error'])

    items = [item.to_dict() for item in listing['items']]
    return _ok(items, count=len(items))


@api_bp.route('/history', methods=['POST'])
@api_admin_required
def create_history():
    try:
        form = _validated(HistoryForm, _payload())
        item = ContentService.create(HistoryItem, {'year': form.year.data, 'event': form.event.data.strip()})
    except ContentError as e:
        return _content_error(e)
    except SQLAlchemyError as e:
        return _store_error('Error creating history item', e)
    return _ok(item.to_dict(), message='History item created', status=201)


@api_bp.route('/history', methods=['PUT'])
@api_admin_required
def update_history():
    try:
        payload = _payload()
        item_id = request.args.get('id') or payload.get('id')
        if not item_id:
            return _fail('Missing id', 400)

        item = ContentService.get_or_404(HistoryItem, item_id)
        form = _validated(HistoryForm, dict(item.to_dict(), **payload))
        item = ContentService.update(HistoryItem, item_id,
                                     {'year': form.year.data, 'event': form.event.data.strip()})
    except ContentError as e:
        return _content_error(e)
    except SQLAlchemyError as e:
        return _store_error('Error updating history item', e)
    return _ok(item.to_dict(), message='History item updated')


@api_bp.route('/history', methods=['DELETE'])
@api_admin_required
def delete_history():
    item_id = request.args.get('id')
    if not item_id:
        return _fail('Missing id', 400)

    try:
        ContentService.delete(HistoryItem, item_id)
    except ContentError as e:
        return _content_error(e)
    except SQLAlchemyError as e:
        return _store_error('Error deleting history item', e)
    return _ok(message='History item deleted')


# ---- contact info ------------------------------------------------------

@api_bp.route('/contact-info', methods=['GET'])
def get_contact_info():
    try:
        contact_info = ContentService.get_or_create_contact_info()
    except ContentError as e:
        return _content_error(e)
    except SQLAlchemyError as e:
        return _store_error('Error fetching contact info', e)
    return _ok(contact_info.to_dict())


@api_bp.route('/contact-info', methods=['PUT'])
@api_admin_required
def update_contact_info():
    try:
        payload = _payload()
        existing = ContentService.find_contact_info()
        merged = dict(existing.to_dict() if existing else {}, **payload)
        form = _validated(ContactInfoForm, merged)
        contact_info = ContentService.update_contact_info({
            'address': form.address.data.strip(),
            'phone': form.phone.data.strip(),
            'email': form.email.data.strip()
        })
    except ContentError as e:
        return _content_error(e)
    except SQLAlchemyError as e:
        return _store_error('Error updating contact info', e)
    return _ok(contact_info.to_dict(), message='Contact info updated successfully')


@api_bp.route('/contact-info/socials', methods=['POST'])
@api_admin_required
def add_social_link():
    try:
        form = _validated(SocialLinkForm, _payload())
        social = ContentService.add_social(form.platform.data.strip(), form.url.data.strip())
    except ContentError as e:
        return _content_error(e)
    except SQLAlchemyError as e:
        return _store_error('Error adding social media link', e)
    return _ok(social.to_dict(), message='Social media link added successfully')


@api_bp.route('/contact-info/socials/<social_id>', methods=['DELETE'])
@api_admin_required
def remove_social_link(social_id):
    try:
        data = ContentService.remove_social(social_id)
    except ContentError as e:
        return _content_error(e)
    except SQLAlchemyError as e:
        return _store_error('Error removing social media link', e)
    return _ok(data, message='Social media link removed successfully')


# ---- upload ------------------------------------------------------------

@api_bp.route('/upload', methods=['POST'])
@api_admin_required
def upload_image():
    folder = request.form.get('folder') or current_app.config['UPLOAD_DEFAULT_FOLDER']
    try:
        url = MediaService.upload_image(request.files.get('file'), folder)
    except ContentError as e:
        return _content_error(e)
    return _ok({'url': url}, message='Image uploaded successfully')


@api_bp.errorhandler(413)
def upload_too_large(e):
    limit_mb = current_app.config['UPLOAD_MAX_BYTES'] / (1024 * 1024)
    return _fail(f'File size must be less than {limit_mb:g}MB for faster uploads', 400)


# ---- public display model ---------------------------------------------

@api_bp.route('/site-content', methods=['GET'])
def site_content():
    return _ok(load_site_content())
