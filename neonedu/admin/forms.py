"""
Admin forms
"""
from flask_wtf import FlaskForm
from flask_wtf.file import FileField, FileAllowed
from werkzeug.datastructures import MultiDict
from wtforms import StringField, TextAreaField, SubmitField, IntegerField
from wtforms.validators import DataRequired, InputRequired, Email, Length, Optional, URL, NumberRange, ValidationError

IMAGE_EXTENSIONS = ['jpg', 'jpeg', 'png', 'gif', 'svg', 'webp']


class TeamMemberForm(FlaskForm):
    """Form for adding or editing a team member"""
    name = StringField('Name', validators=[
        DataRequired(message='Name is required'),
        Length(max=100, message='Name cannot exceed 100 characters')
    ], render_kw={"placeholder": "Dalantai.E"})

    role = StringField('Role', validators=[
        DataRequired(message='Role is required'),
        Length(max=100, message='Role cannot exceed 100 characters')
    ], render_kw={"placeholder": "Founder & Director"})

    # Either a URL or an uploaded file; checked in validate_image
    image = StringField('Image URL')
    image_file = FileField('Upload Image', validators=[
        FileAllowed(IMAGE_EXTENSIONS, 'Only image files are allowed')
    ])

    bio = TextAreaField('Bio', validators=[
        DataRequired(message='Bio is required'),
        Length(max=500, message='Bio cannot exceed 500 characters')
    ])

    submit = SubmitField('Save Team Member')

    def validate_image(self, field):
        if not (field.data or '').strip() and not self.image_file.data:
            raise ValidationError('Image is required')


class CourseForm(FlaskForm):
    """Form for adding or editing a course"""
    title = StringField('Title', validators=[
        DataRequired(message='Title is required'),
        Length(max=200, message='Title cannot exceed 200 characters')
    ], render_kw={"placeholder": "General English"})

    duration = StringField('Duration', validators=[
        DataRequired(message='Duration is required'),
        Length(max=50, message='Duration cannot exceed 50 characters')
    ], render_kw={"placeholder": "4 months"})

    levelitem1 = StringField('Level Item 1', validators=[
        DataRequired(message='Level item 1 is required'),
        Length(max=200)
    ], render_kw={"placeholder": "Beginner"})

    levelitem2 = StringField('Level Item 2', validators=[
        DataRequired(message='Level item 2 is required'),
        Length(max=200)
    ], render_kw={"placeholder": "Intermediate"})

    image = StringField('Image URL', validators=[Optional()])
    image_file = FileField('Upload Image', validators=[
        FileAllowed(IMAGE_EXTENSIONS, 'Only image files are allowed')
    ])

    submit = SubmitField('Save Course')


class StudyAbroadForm(FlaskForm):
    """Form for adding or editing a study abroad program"""
    program_name = StringField('Program Name', validators=[
        Optional(),
        Length(max=200, message='Program name cannot exceed 200 characters')
    ])

    country = StringField('Country', validators=[
        DataRequired(message='Country is required'),
        Length(max=100, message='Country cannot exceed 100 characters')
    ], render_kw={"placeholder": "Australia"})

    description = TextAreaField('Description', validators=[
        DataRequired(message='Description is required')
    ])

    universities = TextAreaField('Universities', validators=[
        DataRequired(message='Universities information is required')
    ], render_kw={"placeholder": "220+ universities and colleges"})

    image = StringField('Background Image URL', validators=[Optional()])
    image_file = FileField('Upload Background Image', validators=[
        FileAllowed(IMAGE_EXTENSIONS, 'Only image files are allowed')
    ])

    link = StringField('Link', validators=[
        Optional(),
        URL(message='Please enter a valid URL')
    ], render_kw={"placeholder": "https://"})

    submit = SubmitField('Save Program')

    # Both texts share one 1000-character column, joined by "|"
    MAX_COMBINED_LENGTH = 999

    def validate_universities(self, field):
        combined = len((self.description.data or '').strip()) + len((field.data or '').strip())
        if combined > self.MAX_COMBINED_LENGTH:
            raise ValidationError(f'Description and universities together cannot exceed '
                                  f'{self.MAX_COMBINED_LENGTH} characters')


class HistoryForm(FlaskForm):
    """Form for adding or editing a timeline entry"""
    year = IntegerField('Year', validators=[
        InputRequired(message='Year is required'),
        NumberRange(min=1900, max=2100, message='Year must be between 1900 and 2100')
    ], render_kw={"placeholder": "2025"})

    event = TextAreaField('Event', validators=[
        DataRequired(message='Event is required'),
        Length(min=1, max=2000, message='Event must be between 1 and 2000 characters')
    ], render_kw={"placeholder": "What happened?"})

    submit = SubmitField('Save')


class ContactInfoForm(FlaskForm):
    """Form for editing the contact details"""
    address = StringField('Address', validators=[
        DataRequired(message='Address is required'),
        Length(max=500, message='Address cannot exceed 500 characters')
    ])

    phone = StringField('Phone', validators=[
        DataRequired(message='Phone is required'),
        Length(max=20, message='Phone cannot exceed 20 characters')
    ])

    email = StringField('Email', validators=[
        DataRequired(message='Email is required'),
        Email(message='Invalid email')
    ])

    submit = SubmitField('Save Contact Info')


class SocialLinkForm(FlaskForm):
    """Form for adding a social media link"""
    platform = StringField('Platform', validators=[
        DataRequired(message='Platform is required'),
        Length(max=50, message='Platform cannot exceed 50 characters')
    ], render_kw={"placeholder": "Facebook"})

    url = StringField('URL', validators=[
        DataRequired(message='URL is required'),
        URL(message='Please enter a valid URL')
    ], render_kw={"placeholder": "https://www.facebook.com/neonedu"})

    submit = SubmitField('Add Link')


def form_from_payload(form_class, payload):
    """
    Bind a form to a JSON payload instead of the request body

    Lets the REST API run the same field checks as the admin panel.
    """
    formdata = MultiDict({
        key: '' if value is None else str(value)
        for key, value in payload.items()
    })
    return form_class(formdata=formdata, meta={'csrf': False})


def first_error(form) -> str:
    """Flatten a form's errors into one message"""
    for messages in form.errors.values():
        if messages:
            return messages[0]
    return 'Invalid data'
