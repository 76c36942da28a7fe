"""API tests for profile creation and updates."""

import io

from homeaway.models import Profile


def test_create_profile_uses_identity_claims(client, auth_headers):
    headers = auth_headers('user_new', email='new@example.com', image_url='https://img.example.com/a.png')

    response = client.post('/api/profiles/', headers=headers, json={
        'first_name': 'Ada',
        'last_name': 'Lovelace',
        'username': 'ada',
    })

    assert response.status_code == 201
    profile = Profile.query.filter_by(auth_id='user_new').first()
    assert profile.email == 'new@example.com'
    assert profile.profile_image == 'https://img.example.com/a.png'
    assert profile.username == 'ada'


def test_create_profile_twice_conflicts(client, auth_headers, guest):
    response = client.post('/api/profiles/', headers=auth_headers('user_guest'), json={
        'first_name': 'Guest',
        'last_name': 'Again',
        'username': 'guest2',
    })

    assert response.status_code == 409


def test_create_profile_validates_names(client, auth_headers):
    response = client.post('/api/profiles/', headers=auth_headers('user_new'), json={
        'first_name': 'A',
        'last_name': 'Lovelace',
    })

    error = response.get_json()['error']
    assert response.status_code == 400
    assert 'first_name' in error
    assert 'username' in error


def test_create_profile_rejects_taken_username(client, auth_headers, guest):
    response = client.post('/api/profiles/', headers=auth_headers('user_new'), json={
        'first_name': 'Ada',
        'last_name': 'Lovelace',
        'username': 'user_guest',
    })

    assert response.status_code == 409


def test_get_profile_requires_profile(client, auth_headers, guest):
    assert client.get('/api/profiles/me', headers=auth_headers('user_new')).status_code == 403

    response = client.get('/api/profiles/me', headers=auth_headers('user_guest'))
    assert response.status_code == 200
    assert response.get_json()['profile']['email'] == 'user_guest@example.com'


def test_profile_image_is_null_without_profile(client, auth_headers):
    response = client.get('/api/profiles/me/image', headers=auth_headers('user_new'))

    assert response.get_json() == {'profile_image': None}


def test_update_profile(client, auth_headers, guest):
    response = client.put('/api/profiles/me', headers=auth_headers('user_guest'), json={
        'first_name': 'Grace',
        'last_name': 'Hopper',
        'username': 'grace',
    })

    assert response.status_code == 200
    assert response.get_json()['profile']['username'] == 'grace'


def test_update_profile_image(client, auth_headers, guest, monkeypatch):
    monkeypatch.setattr(
        'homeaway.api.profiles.routes.upload_image',
        lambda file, folder: f'https://cdn.example.com/{folder}/{file.filename}'
    )

    response = client.post(
        '/api/profiles/me/image',
        headers=auth_headers('user_guest'),
        data={'image': (io.BytesIO(b'avatar'), 'me.png')},
        content_type='multipart/form-data'
    )

    assert response.status_code == 200
    assert response.get_json()['profile_image'] == 'https://cdn.example.com/profiles/me.png'
