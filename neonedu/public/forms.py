"""
Public forms
"""
from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField, SubmitField
from wtforms.validators import DataRequired, Email, Length


class InquiryForm(FlaskForm):
    """Visitor contact form on the landing page"""
    first_name = StringField('First name', validators=[
        DataRequired(message='First name is required'),
        Length(max=100)
    ])

    last_name = StringField('Last name', validators=[
        DataRequired(message='Last name is required'),
        Length(max=100)
    ])

    phone = StringField('Phone', validators=[
        DataRequired(message='Phone number is required'),
        Length(max=30)
    ], render_kw={"placeholder": "+976 9911 2233"})

    email = StringField('Email', validators=[
        DataRequired(message='Email is required'),
        Email(message='Please enter a valid email address')
    ])

    message = TextAreaField('Message', validators=[
        DataRequired(message='Message is required'),
        Length(max=2000, message='Message cannot exceed 2000 characters')
    ])

    submit = SubmitField('Send Message')
