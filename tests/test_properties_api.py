"""API tests for property search, details, calendar, rating and creation."""

import io
from datetime import date, timedelta

import pytest

from homeaway.models import Property, Review
from extensions import db


def future(days):
    return date.today() + timedelta(days=days)


def property_form(**overrides):
    form = {
        'name': 'Treehouse Retreat',
        'tagline': 'Sleep among the branches',
        'price': '120',
        'category': 'Cabin',
        'description': 'A cosy treehouse with a rope bridge, a reading nook and a forest view.',
        'country': 'pt',
        'guests': '2',
        'bedrooms': '1',
        'beds': '1',
        'baths': '1',
        'amenities': '["wifi", "heating"]',
    }
    form.update(overrides)
    return form


@pytest.fixture
def stored_images(monkeypatch):
    uploads = []

    def fake_upload(file, folder):
        uploads.append((file.filename, folder))
        return f'https://cdn.example.com/{folder}/{file.filename}'

    monkeypatch.setattr('homeaway.api.properties.routes.upload_image', fake_upload)
    return uploads


def test_list_filters_by_search_and_category(client, host, property_factory):
    property_factory(host, name='Lakeside Cabin', tagline='Quiet waters', category='cabin')
    property_factory(host, name='City Loft', tagline='Near the lake promenade', category='warehouse')
    property_factory(host, name='Desert Tent', tagline='Stars all night', category='tent')

    response = client.get('/api/properties/?search=LAKE')
    names = [p['name'] for p in response.get_json()['properties']]
    assert response.status_code == 200
    assert names == ['City Loft', 'Lakeside Cabin']

    response = client.get('/api/properties/?search=lake&category=cabin')
    assert [p['name'] for p in response.get_json()['properties']] == ['Lakeside Cabin']


def test_list_returns_card_fields(client, listing):
    card = client.get('/api/properties/').get_json()['properties'][0]

    assert set(card) == {'id', 'name', 'tagline', 'country', 'image', 'price'}


def test_details_include_owner_and_paid_periods(client, listing, guest, booking_factory):
    booking_factory(listing, guest, future(5), future(7))
    booking_factory(listing, guest, future(9), future(11), payment_status=False)

    response = client.get(f'/api/properties/{listing.id}')

    body = response.get_json()['property']
    assert response.status_code == 200
    assert body['profile']['first_name'] == 'Hosty'
    assert body['bookings'] == [
        {'check_in': future(5).isoformat(), 'check_out': future(7).isoformat()}
    ]


def test_details_not_found(client):
    assert client.get('/api/properties/404').status_code == 404


def test_calendar_lists_blocked_periods(client, listing, guest, booking_factory):
    booking_factory(listing, guest, future(5), future(8))

    response = client.get(f'/api/properties/{listing.id}/calendar')

    body = response.get_json()
    assert response.status_code == 200
    assert len(body['blocked_periods']) == 2
    assert body['blocked_periods'][0]['to'] == future(-1).isoformat()
    assert body['disabled_dates'] == [future(5).isoformat(), future(6).isoformat(), future(7).isoformat()]
    assert body['notice'] is None


def test_calendar_resets_overlapping_selection(client, listing, guest, booking_factory):
    booking_factory(listing, guest, future(5), future(8))

    response = client.get(
        f'/api/properties/{listing.id}/calendar?from={future(3).isoformat()}&to={future(6).isoformat()}'
    )

    body = response.get_json()
    assert body['selection'] == {'from': None, 'to': None}
    assert body['notice'] == 'Some dates are already booked, please try again'


def test_calendar_keeps_free_selection(client, listing):
    query = f'from={future(3).isoformat()}&to={future(6).isoformat()}'

    body = client.get(f'/api/properties/{listing.id}/calendar?{query}').get_json()

    assert body['selection'] == {'from': future(3).isoformat(), 'to': future(6).isoformat()}
    assert body['notice'] is None


def test_calendar_rejects_bad_dates(client, listing):
    response = client.get(f'/api/properties/{listing.id}/calendar?from=soon&to=later')

    assert response.status_code == 400


def test_calendar_rejects_dates_beyond_the_horizon(client, listing):
    far = client.get(f'/api/properties/{listing.id}/calendar?from=9999-12-20&to=9999-12-31')
    wide = client.get(f'/api/properties/{listing.id}/calendar?from=0001-01-01&to=9999-12-30')

    assert far.status_code == 400
    assert wide.status_code == 400


def test_calendar_resets_reversed_selection_into_the_past(client, listing):
    query = f'from={future(2).isoformat()}&to={future(-3).isoformat()}'

    body = client.get(f'/api/properties/{listing.id}/calendar?{query}').get_json()

    assert body['selection'] == {'from': None, 'to': None}
    assert body['notice'] == 'Some dates are already booked, please try again'


def test_rating_rounds_half_up(client, listing, profile_factory):
    for index, rating in enumerate([4, 3]):
        author = profile_factory(f'user_{index}')
        db.session.add(Review(property_id=listing.id, profile_id=author.id,
                              rating=rating, comment='Lovely place to stay'))
    db.session.commit()

    response = client.get(f'/api/properties/{listing.id}/rating')

    assert response.get_json() == {'rating': 4, 'count': 2}


def test_rating_without_reviews(client, listing):
    assert client.get(f'/api/properties/{listing.id}/rating').get_json() == {'rating': 0, 'count': 0}


def test_create_property(client, auth_headers, host, stored_images):
    data = property_form()
    data['image'] = (io.BytesIO(b'fake image bytes'), 'tree.jpg')

    response = client.post('/api/properties/', headers=auth_headers('user_host'),
                           data=data, content_type='multipart/form-data')

    assert response.status_code == 201
    body = response.get_json()['property']
    assert body['category'] == 'cabin'
    assert body['country'] == 'PT'
    assert body['price'] == 120
    assert body['amenities'] == ['wifi', 'heating']
    assert body['image'] == 'https://cdn.example.com/properties/tree.jpg'
    assert stored_images == [('tree.jpg', 'properties')]
    assert Property.query.filter_by(profile_id=host.id).count() == 1


def test_create_property_validates_fields(client, auth_headers, host, stored_images):
    data = property_form(description='Too short', category='castle')
    data['image'] = (io.BytesIO(b'fake image bytes'), 'tree.jpg')

    response = client.post('/api/properties/', headers=auth_headers('user_host'),
                           data=data, content_type='multipart/form-data')

    error = response.get_json()['error']
    assert response.status_code == 400
    assert 'description' in error
    assert 'category' in error
    assert stored_images == []


def test_create_property_requires_image(client, auth_headers, host, stored_images):
    data = property_form()
    data['image'] = (io.BytesIO(b'not an image'), 'notes.txt')

    response = client.post('/api/properties/', headers=auth_headers('user_host'),
                           data=data, content_type='multipart/form-data')

    assert response.status_code == 400
    assert 'image' in response.get_json()['error']


def test_create_property_rejects_large_image(client, auth_headers, host, stored_images):
    data = property_form()
    data['image'] = (io.BytesIO(b'x' * (1024 * 1024 + 1)), 'huge.png')

    response = client.post('/api/properties/', headers=auth_headers('user_host'),
                           data=data, content_type='multipart/form-data')

    assert response.status_code == 400
    assert stored_images == []
