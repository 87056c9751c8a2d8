from neonedu import db
from neonedu.models.history import HistoryItem
from neonedu.services.history_service import HistoryService
from tests.conftest import add_rows


def test_static_timeline_when_no_rows():
    timeline = HistoryService.timeline([])

    assert [entry['year'] for entry in timeline] == [2015, 2017, 2022, 2023, 2025]
    assert timeline[0]['event'] == 'Founded in Ulaanbaatar, Mongolia'


def test_static_timeline_is_a_copy():
    HistoryService.static_timeline()[0]['event'] = 'changed'

    assert HistoryService.static_timeline()[0]['event'] == 'Founded in Ulaanbaatar, Mongolia'


def test_rows_replace_static_timeline():
    timeline = HistoryService.timeline([{'id': 'x', 'year': 2019, 'event': 'Opened office'}])

    assert timeline == [{'year': 2019, 'event': 'Opened office'}]


def test_admin_listing_empty(app):
    with app.app_context():
        listing = HistoryService.admin_listing()

    assert listing['state'] == HistoryService.STATE_EMPTY
    assert listing['items'] == []


def test_admin_listing_newest_year_first(app):
    add_rows(app, HistoryItem(year=2015, event='Founded'), HistoryItem(year=2022, event='Courses'))

    with app.app_context():
        listing = HistoryService.admin_listing()
        years = [item.year for item in listing['items']]

    assert listing['state'] == HistoryService.STATE_READY
    assert years == [2022, 2015]


def test_admin_listing_needs_setup_without_table(app):
    with app.app_context():
        HistoryItem.__table__.drop(db.engine)
        listing = HistoryService.admin_listing()

    assert listing['state'] == HistoryService.STATE_NEEDS_SETUP
    assert listing['items'] == []
    assert 'history' in listing['error']


def test_public_timeline_survives_missing_table(app, client):
    with app.app_context():
        HistoryItem.__table__.drop(db.engine)

    response = client.get('/api/site-content')

    assert response.status_code == 200
    assert len(response.get_json()['data']['history']) == 5


def test_history_api_reports_missing_table(app, client):
    with app.app_context():
        HistoryItem.__table__.drop(db.engine)

    response = client.get('/api/history')

    assert response.status_code == 503
    assert response.get_json()['success'] is False
