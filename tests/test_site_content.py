import time

from neonedu import db
from neonedu.models.contact_info import ContactInfo, SocialLink
from neonedu.models.course import Course
from neonedu.models.study_abroad import StudyAbroadProgram
from neonedu.models.team_member import TeamMember
from neonedu.services import content_service
from neonedu.services.content_service import build_display_model, load_site_content
from tests.conftest import add_rows


def test_empty_store(client):
    data = client.get('/api/site-content').get_json()['data']

    assert data['team'] == []
    assert data['courses'] == []
    assert data['study_abroad'] == []
    assert [entry['year'] for entry in data['history']] == [2015, 2017, 2022, 2023, 2025]


def test_display_model_from_store(app, client):
    add_rows(app,
             TeamMember(name='Bat.O', role='Teacher', image='/bat.png', bio='BA'),
             TeamMember(name='Anar.P', role='Co-Founder', image='/anar.png', bio='PhD'),
             Course(title='Academic English', description='4-month course', category='Academic Preparation',
                    link='https://neonedu.mn/courses'),
             Course(title='General English', description='Suitable for Beginner to Intermediate levels.',
                    category='English Language', link='https://neonedu.mn/courses'),
             StudyAbroadProgram(country='Brazil', description='Sunny campuses.|Contact us'))

    data = client.get('/api/site-content').get_json()['data']

    assert [card['name'] for card in data['team']] == ['Anar.P', 'Bat.O']
    assert data['team'][0]['position'] == 'Co-Founder'
    assert [card['name'] for card in data['courses']] == ['General English', 'Academic English']
    assert data['courses'][0]['levelItem1'] == 'Beginner'
    assert data['study_abroad'][0]['dotbg'] == '/china dots.svg'
    assert data['study_abroad'][0]['universities'] == 'Contact us'


def test_failing_section_is_empty(app, client, monkeypatch):
    add_rows(app, TeamMember(name='Anar.P', role='Co-Founder', image='/anar.png', bio='PhD'))

    def broken():
        raise RuntimeError('connection reset')

    monkeypatch.setitem(content_service.FETCHERS, 'courses', broken)

    data = client.get('/api/site-content').get_json()['data']

    assert data['courses'] == []
    assert [card['name'] for card in data['team']] == ['Anar.P']


def test_timeout_renders_empty_sections(app, client, monkeypatch):
    add_rows(app, TeamMember(name='Anar.P', role='Co-Founder', image='/anar.png', bio='PhD'))
    app.config['PUBLIC_FETCH_TIMEOUT'] = 0.05

    def slow():
        time.sleep(0.5)
        return []

    monkeypatch.setitem(content_service.FETCHERS, 'team', slow)

    data = client.get('/api/site-content').get_json()['data']

    assert data['team'] == []
    assert data['courses'] == []
    assert len(data['history']) == 5


def test_cached_model_is_served(app, monkeypatch):
    cached = {'team': [], 'courses': [], 'study_abroad': [], 'history': [{'year': 2000, 'event': 'cached'}]}
    monkeypatch.setattr(content_service.cache_service, 'get', lambda key: cached)

    with app.app_context():
        assert load_site_content() is cached


def test_degraded_model_is_not_cached(app, monkeypatch):
    stored = {}
    monkeypatch.setattr(content_service.cache_service, 'get', lambda key: None)
    monkeypatch.setattr(content_service.cache_service, 'set',
                        lambda key, value, ttl=300: stored.setdefault(key, value))

    with app.app_context():
        load_site_content()
    assert stored == {}

    add_rows(app, TeamMember(name='Anar.P', role='Co-Founder', image='/anar.png', bio='PhD'))
    with app.app_context():
        load_site_content()
    assert list(stored) == ['site-content']


def test_build_display_model_tolerates_missing_sections():
    model = build_display_model({'team': None})

    assert model['team'] == []
    assert model['courses'] == []
    assert len(model['history']) == 5


def test_home_page_renders(app, client):
    add_rows(app, StudyAbroadProgram(country='Hungary', description='Begin studies without IELTS.|University of Miskolc'))

    response = client.get('/')
    body = response.get_data(as_text=True)

    assert response.status_code == 200
    assert 'Founded in Ulaanbaatar, Mongolia' in body
    assert 'University of Miskolc' in body


def test_home_page_shows_contact_footer(app, client):
    contact_info = ContactInfo(address='Peace Avenue 17, Ulaanbaatar', phone='+976 7700 1234',
                               email='info@neonedu.mn')
    contact_info.socials.append(SocialLink(platform='facebook', url='https://facebook.com/neonedu'))
    add_rows(app, contact_info)

    body = client.get('/').get_data(as_text=True)

    assert 'Peace Avenue 17, Ulaanbaatar' in body
    assert 'mailto:info@neonedu.mn' in body
    assert 'https://facebook.com/neonedu' in body


def test_home_page_without_contact_table(app, client):
    add_rows(app, TeamMember(name='Anar.P', role='Co-Founder', image='/anar.png', bio='PhD'))
    with app.app_context():
        SocialLink.__table__.drop(db.engine)
        ContactInfo.__table__.drop(db.engine)

    response = client.get('/')
    body = response.get_data(as_text=True)

    assert response.status_code == 200
    assert 'Founded in Ulaanbaatar, Mongolia' in body
    assert 'Anar.P' in body
    assert 'mailto:' not in body
