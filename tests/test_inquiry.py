from unittest.mock import MagicMock, patch

import requests

from neonedu.services.inquiry_service import InquiryService

INQUIRY = {
    'first_name': 'Saraa',
    'last_name': 'Bold',
    'phone': '+976 9911 2233',
    'email': 'saraa@example.com',
    'message': 'When does the next IELTS course start?',
}


def _emailjs_response(status_code=200, text='OK'):
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.text = text
    return response


def test_template_params():
    params = InquiryService.template_params(dict(INQUIRY, first_name=' Saraa '), 'neon.edu.mn@gmail.com')

    assert params == {
        'user_name': 'Saraa Bold',
        'user_email': 'saraa@example.com',
        'user_phone': '+976 9911 2233',
        'message': 'When does the next IELTS course start?',
        'reply_to': 'saraa@example.com',
        'to_email': 'neon.edu.mn@gmail.com',
    }


def test_home_page_has_inquiry_form(client):
    body = client.get('/').get_data(as_text=True)

    assert 'action="/inquiry"' in body
    assert 'name="first_name"' in body


@patch('neonedu.services.inquiry_service.requests.post')
def test_inquiry_is_relayed(mock_post, client):
    mock_post.return_value = _emailjs_response()

    response = client.post('/inquiry', data=INQUIRY)

    assert response.status_code == 302
    assert response.headers['Location'].endswith('/#contact')

    args, kwargs = mock_post.call_args
    assert args[0] == 'https://api.emailjs.com/api/v1.0/email/send'
    assert kwargs['json']['service_id'] == 'test-service'
    assert kwargs['json']['template_id'] == 'test-template'
    assert kwargs['json']['user_id'] == 'test-public-key'
    assert kwargs['json']['accessToken'] == 'test-private-key'
    assert kwargs['json']['template_params']['user_name'] == 'Saraa Bold'
    assert kwargs['timeout'] == 15

    body = client.get('/').get_data(as_text=True)
    assert 'Message sent successfully! We will get back to you soon.' in body


@patch('neonedu.services.inquiry_service.requests.post')
def test_invalid_inquiry_is_not_sent(mock_post, client):
    response = client.post('/inquiry', data=dict(INQUIRY, email='saraa-at-example', last_name=''))
    body = response.get_data(as_text=True)

    assert response.status_code == 200
    assert 'Please enter a valid email address' in body
    assert 'Last name is required' in body
    assert 'When does the next IELTS course start?' in body
    mock_post.assert_not_called()


@patch('neonedu.services.inquiry_service.requests.post')
def test_provider_rejection_is_reported(mock_post, client):
    mock_post.return_value = _emailjs_response(429, 'Too Many Requests')

    response = client.post('/inquiry', data=INQUIRY)
    body = response.get_data(as_text=True)

    assert response.status_code == 200
    assert 'Too many requests. Please try again in a few minutes.' in body
    assert 'saraa@example.com' in body


@patch('neonedu.services.inquiry_service.requests.post')
def test_relay_timeout_is_reported(mock_post, client):
    mock_post.side_effect = requests.exceptions.Timeout()

    body = client.post('/inquiry', data=INQUIRY).get_data(as_text=True)

    assert 'Failed to send message. Please try again.' in body


@patch('neonedu.services.inquiry_service.requests.post')
def test_unconfigured_relay(mock_post, app, client):
    app.config['EMAILJS_SERVICE_ID'] = ''

    body = client.post('/inquiry', data=INQUIRY).get_data(as_text=True)

    assert 'Email service is not configured' in body
    mock_post.assert_not_called()
