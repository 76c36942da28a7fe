"""API tests for reviews."""

from extensions import db
from homeaway.models import Review


def review_payload(property_id, **overrides):
    payload = {
        'property_id': property_id,
        'rating': 5,
        'comment': 'Wonderful stay, spotless and calm.',
    }
    payload.update(overrides)
    return payload


def test_create_review(client, auth_headers, guest, listing):
    response = client.post('/api/reviews/', headers=auth_headers('user_guest'),
                           json=review_payload(listing.id))

    assert response.status_code == 201
    body = response.get_json()['review']
    assert body['rating'] == 5
    assert body['profile']['first_name'] == 'Guest'


def test_review_validation(client, auth_headers, guest, listing):
    response = client.post('/api/reviews/', headers=auth_headers('user_guest'),
                           json=review_payload(listing.id, rating=6, comment='meh'))

    error = response.get_json()['error']
    assert response.status_code == 400
    assert 'rating' in error
    assert 'comment' in error


def test_one_review_per_property(client, auth_headers, guest, listing):
    headers = auth_headers('user_guest')
    client.post('/api/reviews/', headers=headers, json=review_payload(listing.id))

    response = client.post('/api/reviews/', headers=headers, json=review_payload(listing.id, rating=2))

    assert response.status_code == 409
    assert Review.query.count() == 1


def test_owner_cannot_review_own_property(client, auth_headers, host, listing):
    response = client.post('/api/reviews/', headers=auth_headers('user_host'),
                           json=review_payload(listing.id))

    assert response.status_code == 403


def test_property_reviews_newest_first(client, listing, profile_factory):
    for index, comment in enumerate(['First visit was lovely', 'Second visit was better']):
        author = profile_factory(f'user_{index}', first_name=f'Author{index}')
        db.session.add(Review(property_id=listing.id, profile_id=author.id, rating=4, comment=comment))
        db.session.commit()

    reviews = client.get(f'/api/reviews/property/{listing.id}').get_json()['reviews']

    assert [r['comment'] for r in reviews] == ['Second visit was better', 'First visit was lovely']
    assert reviews[0]['profile']['first_name'] == 'Author1'


def test_my_reviews_and_existing_review_lookup(client, auth_headers, guest, listing):
    headers = auth_headers('user_guest')
    assert client.get(f'/api/reviews/property/{listing.id}/mine', headers=headers).get_json() == {'review': None}

    client.post('/api/reviews/', headers=headers, json=review_payload(listing.id))

    mine = client.get(f'/api/reviews/property/{listing.id}/mine', headers=headers).get_json()['review']
    assert mine['rating'] == 5

    reviews = client.get('/api/reviews/me', headers=headers).get_json()['reviews']
    assert reviews[0]['property'] == {'name': listing.name, 'image': listing.image}


def test_delete_only_own_review(client, auth_headers, guest, profile_factory, listing):
    other = profile_factory('user_other')
    theirs = Review(property_id=listing.id, profile_id=other.id, rating=3, comment='It was fine overall')
    db.session.add(theirs)
    db.session.commit()
    theirs_id = theirs.id

    headers = auth_headers('user_guest')
    assert client.delete(f'/api/reviews/{theirs_id}', headers=headers).status_code == 404

    created = client.post('/api/reviews/', headers=headers, json=review_payload(listing.id))
    review_id = created.get_json()['review']['id']

    assert client.delete(f'/api/reviews/{review_id}', headers=headers).status_code == 200
    assert Review.query.filter_by(id=review_id).first() is None
