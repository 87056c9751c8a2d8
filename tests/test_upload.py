from io import BytesIO
from unittest.mock import MagicMock, patch

import requests

from neonedu.services.media_service import MediaService

PNG = b'\x89PNG\r\n\x1a\n' + b'\x00' * 64


def _upload(client, content=PNG, filename='photo.png', content_type='image/png', **fields):
    data = dict(fields, file=(BytesIO(content), filename, content_type))
    return client.post('/api/upload', data=data, content_type='multipart/form-data')


def _cloudinary_response(url='https://res.cloudinary.com/test-cloud/image/upload/v1/neonedu/photo.png'):
    response = MagicMock()
    response.json.return_value = {'secure_url': url}
    response.raise_for_status.return_value = None
    return response


def test_upload_needs_session(client):
    response = _upload(client)

    assert response.status_code == 401


def test_upload_without_file(admin_client):
    response = admin_client.post('/api/upload', data={}, content_type='multipart/form-data')

    assert response.status_code == 400
    assert response.get_json()['message'] == 'No file provided'


def test_upload_rejects_non_images(admin_client):
    response = _upload(admin_client, content=b'hello', filename='notes.txt', content_type='text/plain')

    assert response.status_code == 400
    assert response.get_json()['message'] == 'File must be an image'


def test_upload_rejects_large_files(admin_client):
    response = _upload(admin_client, content=b'\x00' * (2 * 1024 * 1024 + 1))

    assert response.status_code == 400
    assert response.get_json()['message'] == 'File size must be less than 2MB for faster uploads'


def test_request_body_over_limit(admin_client):
    response = _upload(admin_client, content=b'\x00' * (3 * 1024 * 1024))

    assert response.status_code == 400
    assert response.get_json()['success'] is False


@patch('neonedu.services.media_service.requests.post')
def test_upload_signs_request(mock_post, admin_client):
    mock_post.return_value = _cloudinary_response()

    response = _upload(admin_client, folder='neonedu/team')

    assert response.status_code == 200
    assert response.get_json()['data'] == {
        'url': 'https://res.cloudinary.com/test-cloud/image/upload/v1/neonedu/photo.png'
    }

    args, kwargs = mock_post.call_args
    assert args[0] == 'https://api.cloudinary.com/v1_1/test-cloud/image/upload'
    payload = kwargs['data']
    assert payload['folder'] == 'neonedu/team'
    assert payload['api_key'] == 'test-key'
    assert payload['signature'] == MediaService.sign(
        {'folder': 'neonedu/team', 'timestamp': payload['timestamp']}, 'test-secret')
    assert kwargs['timeout'] == 90
    assert kwargs['files']['file'][0] == 'photo.png'


@patch('neonedu.services.media_service.requests.post')
def test_upload_default_folder(mock_post, admin_client):
    mock_post.return_value = _cloudinary_response()

    _upload(admin_client)

    assert mock_post.call_args.kwargs['data']['folder'] == 'neonedu'


@patch('neonedu.services.media_service.requests.post')
def test_upload_timeout(mock_post, admin_client):
    mock_post.side_effect = requests.exceptions.Timeout()

    response = _upload(admin_client)

    assert response.status_code == 500
    assert response.get_json()['message'] == 'Upload timed out. Please try a smaller image.'


@patch('neonedu.services.media_service.requests.post')
def test_upload_provider_error(mock_post, admin_client):
    mock_post.return_value.raise_for_status.side_effect = requests.exceptions.HTTPError('401 Unauthorized')

    response = _upload(admin_client)

    assert response.status_code == 500
    assert response.get_json()['message'] == 'Failed to upload image'


def test_signature_is_order_independent():
    first = MediaService.sign({'timestamp': 1700000000, 'folder': 'neonedu'}, 'secret')
    second = MediaService.sign({'folder': 'neonedu', 'timestamp': 1700000000}, 'secret')

    assert first == second
    assert len(first) == 40
