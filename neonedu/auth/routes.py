"""
Authentication routes
"""
from datetime import datetime
from functools import wraps
from flask import render_template, redirect, url_for, flash, request, jsonify
from flask_login import login_user, logout_user, current_user, login_required
from neonedu.auth import auth_bp
from neonedu.models.user import User
from neonedu import db


def admin_required(f):
    """Decorator to require an admin session"""
    @wraps(f)
    @login_required
    def decorated_function(*args, **kwargs):
        if not current_user.is_admin:
            flash('Access denied. Administrator permissions required.', 'error')
            return redirect(url_for('public.index'))
        return f(*args, **kwargs)
    return decorated_function


def api_admin_required(f):
    """Decorator for JSON endpoints: 401 envelope instead of a redirect"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            return jsonify({'success': False, 'error': 'No session found'}), 401
        if not current_user.is_admin:
            return jsonify({'success': False, 'error': 'Administrator permissions required'}), 403
        return f(*args, **kwargs)
    return decorated_function


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Login route"""
    if current_user.is_authenticated:
        return redirect(url_for('admin.dashboard'))

    if request.method == 'POST':
        username = request.form.get('username')
        password = request.form.get('password')

        user = User.query.filter_by(username=username).first()

        if user and user.check_password(password):
            login_user(user)
            user.last_login = datetime.utcnow()
            db.session.commit()

            next_page = request.args.get('next')
            # Only follow local redirects
            if not next_page or not next_page.startswith('/') or next_page.startswith('//'):
                next_page = url_for('admin.dashboard')

            return redirect(next_page)
        else:
            flash('Invalid username or password', 'error')

    return render_template('auth/login.html')


@auth_bp.route('/logout')
def logout():
    """Logout route"""
    logout_user()
    flash('You have been logged out', 'success')
    return redirect(url_for('auth.login'))
