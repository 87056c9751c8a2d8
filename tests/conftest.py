import pytest

from neonedu import create_app, db


@pytest.fixture
def app():
    # No app context stays pushed: requests must each get their own g
    app = create_app('testing')
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(app):
    client = app.test_client()
    response = client.post('/auth/login', data={
        'username': app.config['ADMIN_USERNAME'],
        'password': app.config['ADMIN_PASSWORD']
    })
    assert response.status_code == 302
    return client


def add_rows(app, *rows):
    """Insert model instances and return their ids"""
    with app.app_context():
        db.session.add_all(rows)
        db.session.commit()
        return [row.id for row in rows]
