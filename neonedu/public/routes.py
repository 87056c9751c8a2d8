"""
Public site routes
"""
from flask import render_template, redirect, url_for, flash
from neonedu.exceptions import InquiryError
from neonedu.public import public_bp
from neonedu.public.forms import InquiryForm
from neonedu.services.content_service import load_site_content
from neonedu.services.inquiry_service import InquiryService


@public_bp.route('/')
def index():
    """Marketing landing page"""
    return render_template('public/index.html', content=load_site_content(), form=InquiryForm())


@public_bp.route('/inquiry', methods=['POST'])
def inquiry():
    """Visitor contact form; relays the message by email"""
    form = InquiryForm()

    if form.validate_on_submit():
        try:
            InquiryService.send({
                'first_name': form.first_name.data,
                'last_name': form.last_name.data,
                'phone': form.phone.data,
                'email': form.email.data,
                'message': form.message.data,
            })
            flash('Message sent successfully! We will get back to you soon.', 'success')
            return redirect(url_for('public.index', _anchor='contact'))
        except InquiryError as e:
            flash(e.message, 'error')

    # Re-render with the visitor's input and field errors
    return render_template('public/index.html', content=load_site_content(), form=form)
