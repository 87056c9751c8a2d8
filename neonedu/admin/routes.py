"""
Admin routes
"""
from flask import render_template, redirect, url_for, flash, request, current_app
from sqlalchemy.exc import SQLAlchemyError
from neonedu.admin import admin_bp
from neonedu.admin.forms import (TeamMemberForm, CourseForm, StudyAbroadForm, HistoryForm,
                                 ContactInfoForm, SocialLinkForm)
from neonedu.auth.routes import admin_required
from neonedu.exceptions import ContentError
from neonedu.models.team_member import TeamMember
from neonedu.models.course import Course
from neonedu.models.study_abroad import StudyAbroadProgram
from neonedu.models.history import HistoryItem
from neonedu.models.contact_info import SocialLink
from neonedu.services.content_service import ContentService
from neonedu.services.course_transformer import CourseTransformer
from neonedu.services.study_abroad_transformer import StudyAbroadTransformer, split_fields
from neonedu.services.history_service import HistoryService
from neonedu.services.media_service import MediaService


def _image_url(form, folder):
    """URL typed into the form, replaced by the uploaded file when there is one"""
    if form.image_file.data:
        return MediaService.upload_image(form.image_file.data, folder)
    return (form.image.data or '').strip()


@admin_bp.route('/')
@admin_bp.route('/dashboard')
@admin_required
def dashboard():
    """Admin dashboard"""
    history = HistoryService.admin_listing()
    stats = {}
    try:
        stats = {
            'team_members': TeamMember.query.count(),
            'courses': Course.query.count(),
            'study_abroad': StudyAbroadProgram.query.count(),
            'socials': SocialLink.query.count(),
        }
    except SQLAlchemyError as e:
        flash(f'Error loading statistics: {str(e)}', 'error')

    return render_template('admin/dashboard.html',
                           stats=stats,
                           history_count=len(history['items']),
                           history_state=history['state'])


# ---- team members ------------------------------------------------------

@admin_bp.route('/team-members')
@admin_required
def team_members():
    """Manage team members"""
    members = ContentService.list_rows(TeamMember, newest_first=True)
    return render_template('admin/team_members.html', members=members)


@admin_bp.route('/team-members/new', methods=['GET', 'POST'])
@admin_required
def create_team_member():
    """Add a team member"""
    form = TeamMemberForm()

    if form.validate_on_submit():
        try:
            member = ContentService.create(TeamMember, {
                'name': form.name.data.strip(),
                'role': form.role.data.strip(),
                'image': _image_url(form, 'neonedu/team'),
                'bio': form.bio.data.strip()
            })
            flash(f'Team member "{member.name}" created successfully', 'success')
            return redirect(url_for('admin.team_members'))
        except (ContentError, SQLAlchemyError) as e:
            flash(f'Error creating team member: {str(e)}', 'error')

    return render_template('admin/form.html', form=form, title='Add Team Member',
                           back_url=url_for('admin.team_members'))


@admin_bp.route('/team-members/<member_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_team_member(member_id):
    """Edit a team member"""
    member = _get_or_redirect(TeamMember, member_id)
    if member is None:
        return redirect(url_for('admin.team_members'))

    form = TeamMemberForm(obj=member)

    if form.validate_on_submit():
        try:
            ContentService.update(TeamMember, member_id, {
                'name': form.name.data.strip(),
                'role': form.role.data.strip(),
                'image': _image_url(form, 'neonedu/team'),
                'bio': form.bio.data.strip()
            })
            flash(f'Team member "{member.name}" updated successfully', 'success')
            return redirect(url_for('admin.team_members'))
        except (ContentError, SQLAlchemyError) as e:
            flash(f'Error updating team member: {str(e)}', 'error')

    return render_template('admin/form.html', form=form, title='Edit Team Member',
                           back_url=url_for('admin.team_members'), image=member.image)


@admin_bp.route('/team-members/<member_id>/delete', methods=['POST'])
@admin_required
def delete_team_member(member_id):
    """Delete a team member"""
    _delete_and_flash(TeamMember, member_id, 'Team member')
    return redirect(url_for('admin.team_members'))


# ---- courses -----------------------------------------------------------

@admin_bp.route('/courses')
@admin_required
def courses():
    """Manage courses"""
    all_courses = ContentService.list_rows(Course, newest_first=True)
    cards = {course.id: CourseTransformer.to_display(course.to_dict()) for course in all_courses}
    return render_template('admin/courses.html', courses=all_courses, cards=cards)


def _course_values(form):
    data = {
        'title': form.title.data,
        'duration': form.duration.data,
        'levelitem1': form.levelitem1.data,
        'levelitem2': form.levelitem2.data,
        'image': _image_url(form, 'neonedu/courses')
    }
    return CourseTransformer.to_storage(data, current_app.config['COURSE_PLACEHOLDER_LINK'])


@admin_bp.route('/courses/new', methods=['GET', 'POST'])
@admin_required
def create_course():
    """Add a course"""
    form = CourseForm()

    if form.validate_on_submit():
        try:
            course = ContentService.create(Course, _course_values(form))
            flash(f'Course "{course.title}" created successfully', 'success')
            return redirect(url_for('admin.courses'))
        except (ContentError, SQLAlchemyError) as e:
            flash(f'Error creating course: {str(e)}', 'error')

    return render_template('admin/form.html', form=form, title='Add Course',
                           back_url=url_for('admin.courses'))


@admin_bp.route('/courses/<course_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_course(course_id):
    """Edit a course"""
    course = _get_or_redirect(Course, course_id)
    if course is None:
        return redirect(url_for('admin.courses'))

    form = CourseForm(obj=course)

    # Legacy rows only have the encoded description; show the resolved values
    if request.method == 'GET':
        card = CourseTransformer.to_display(course.to_dict())
        form.duration.data = course.duration or card['duration']
        form.levelitem1.data = course.levelitem1 or card['levelItem1']
        form.levelitem2.data = course.levelitem2 or card['levelItem2']

    if form.validate_on_submit():
        try:
            ContentService.update(Course, course_id, _course_values(form))
            flash(f'Course "{form.title.data}" updated successfully', 'success')
            return redirect(url_for('admin.courses'))
        except (ContentError, SQLAlchemyError) as e:
            flash(f'Error updating course: {str(e)}', 'error')

    return render_template('admin/form.html', form=form, title='Edit Course',
                           back_url=url_for('admin.courses'), image=course.image)


@admin_bp.route('/courses/<course_id>/delete', methods=['POST'])
@admin_required
def delete_course(course_id):
    """Delete a course"""
    _delete_and_flash(Course, course_id, 'Course')
    return redirect(url_for('admin.courses'))


# ---- study abroad ------------------------------------------------------

@admin_bp.route('/study-abroad')
@admin_required
def study_abroad():
    """Manage study abroad programs"""
    programs = ContentService.list_rows(StudyAbroadProgram, newest_first=True)
    fallback_country = current_app.config['FALLBACK_COUNTRY']
    cards = {
        program.id: StudyAbroadTransformer.to_display(program.to_dict(), fallback_country)
        for program in programs
    }
    return render_template('admin/study_abroad.html', programs=programs, cards=cards)


def _program_values(form):
    return StudyAbroadTransformer.to_storage({
        'program_name': form.program_name.data,
        'country': form.country.data,
        'description': form.description.data,
        'universities': form.universities.data,
        'image': _image_url(form, 'neonedu/study-abroad'),
        'link': form.link.data
    })


@admin_bp.route('/study-abroad/new', methods=['GET', 'POST'])
@admin_required
def create_study_abroad():
    """Add a study abroad program"""
    form = StudyAbroadForm()

    if form.validate_on_submit():
        try:
            program = ContentService.create(StudyAbroadProgram, _program_values(form))
            flash(f'Program for "{program.country}" created successfully', 'success')
            return redirect(url_for('admin.study_abroad'))
        except (ContentError, SQLAlchemyError) as e:
            flash(f'Error creating program: {str(e)}', 'error')

    return render_template('admin/form.html', form=form, title='Add Study Abroad Program',
                           back_url=url_for('admin.study_abroad'))


@admin_bp.route('/study-abroad/<program_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_study_abroad(program_id):
    """Edit a study abroad program"""
    program = _get_or_redirect(StudyAbroadProgram, program_id)
    if program is None:
        return redirect(url_for('admin.study_abroad'))

    form = StudyAbroadForm(obj=program)

    # The stored description holds both texts
    if request.method == 'GET':
        form.description.data, form.universities.data = split_fields(program.description)

    if form.validate_on_submit():
        try:
            ContentService.update(StudyAbroadProgram, program_id, _program_values(form))
            flash(f'Program for "{form.country.data}" updated successfully', 'success')
            return redirect(url_for('admin.study_abroad'))
        except (ContentError, SQLAlchemyError) as e:
            flash(f'Error updating program: {str(e)}', 'error')

    return render_template('admin/form.html', form=form, title='Edit Study Abroad Program',
                           back_url=url_for('admin.study_abroad'), image=program.image)


@admin_bp.route('/study-abroad/<program_id>/delete', methods=['POST'])
@admin_required
def delete_study_abroad(program_id):
    """Delete a study abroad program"""
    _delete_and_flash(StudyAbroadProgram, program_id, 'Program')
    return redirect(url_for('admin.study_abroad'))


# ---- history -----------------------------------------------------------

@admin_bp.route('/history', methods=['GET', 'POST'])
@admin_required
def history():
    """History timeline: list and add entries"""
    form = HistoryForm()

    if form.validate_on_submit():
        try:
            ContentService.create(HistoryItem, {'year': form.year.data, 'event': form.event.data.strip()})
            flash('History item created', 'success')
            return redirect(url_for('admin.history'))
        except (ContentError, SQLAlchemyError) as e:
            flash(f'Error creating history item: {str(e)}', 'error')

    listing = HistoryService.admin_listing()
    return render_template('admin/history.html', form=form,
                           items=listing['items'],
                           state=listing['state'],
                           error=listing['error'])


@admin_bp.route('/history/<item_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_history(item_id):
    """Edit a timeline entry"""
    item = _get_or_redirect(HistoryItem, item_id)
    if item is None:
        return redirect(url_for('admin.history'))

    form = HistoryForm(obj=item)

    if form.validate_on_submit():
        try:
            ContentService.update(HistoryItem, item_id, {'year': form.year.data, 'event': form.event.data.strip()})
            flash('History item updated', 'success')
            return redirect(url_for('admin.history'))
        except (ContentError, SQLAlchemyError) as e:
            flash(f'Error updating history item: {str(e)}', 'error')

    return render_template('admin/form.html', form=form, title='Edit History Item',
                           back_url=url_for('admin.history'))


@admin_bp.route('/history/<item_id>/delete', methods=['POST'])
@admin_required
def delete_history(item_id):
    """Delete a timeline entry"""
    _delete_and_flash(HistoryItem, item_id, 'History item')
    return redirect(url_for('admin.history'))


# ---- contact info ------------------------------------------------------

@admin_bp.route('/contact-info', methods=['GET', 'POST'])
@admin_required
def contact_info():
    """Edit contact details and social links"""
    info = ContentService.get_or_create_contact_info()
    form = ContactInfoForm(obj=info)
    social_form = SocialLinkForm(prefix='social')

    if form.submit.data and form.validate_on_submit():
        try:
            ContentService.update_contact_info({
                'address': form.address.data.strip(),
                'phone': form.phone.data.strip(),
                'email': form.email.data.strip()
            })
            flash('Contact info updated successfully', 'success')
            return redirect(url_for('admin.contact_info'))
        except (ContentError, SQLAlchemyError) as e:
            flash(f'Error updating contact info: {str(e)}', 'error')

    return render_template('admin/contact_info.html', form=form, social_form=social_form, info=info)


@admin_bp.route('/contact-info/socials', methods=['POST'])
@admin_required
def add_social():
    """Add a social media link"""
    social_form = SocialLinkForm(prefix='social')

    if social_form.validate_on_submit():
        try:
            ContentService.add_social(social_form.platform.data.strip(), social_form.url.data.strip())
            flash('Social media link added successfully', 'success')
        except (ContentError, SQLAlchemyError) as e:
            flash(f'Error adding social media link: {str(e)}', 'error')
    else:
        for messages in social_form.errors.values():
            for message in messages:
                flash(message, 'error')

    return redirect(url_for('admin.contact_info'))


@admin_bp.route('/contact-info/socials/<social_id>/delete', methods=['POST'])
@admin_required
def remove_social(social_id):
    """Remove a social media link"""
    try:
        ContentService.remove_social(social_id)
        flash('Social media link removed successfully', 'success')
    except (ContentError, SQLAlchemyError) as e:
        flash(f'Error removing social media link: {str(e)}', 'error')

    return redirect(url_for('admin.contact_info'))


# ---- helpers -----------------------------------------------------------

def _get_or_redirect(model, row_id):
    try:
        return ContentService.get_or_404(model, row_id)
    except ContentError as e:
        flash(e.message, 'error')
        return None


def _delete_and_flash(model, row_id, label):
    try:
        ContentService.delete(model, row_id)
        flash(f'{label} deleted successfully', 'success')
    except (ContentError, SQLAlchemyError) as e:
        flash(f'Error deleting {label.lower()}: {str(e)}', 'error')
