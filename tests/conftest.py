"""Shared pytest fixtures: app, client, identity tokens and model factories."""

import pytest
from flask_jwt_extended import create_access_token

from extensions import db
from homeaway import create_app
from homeaway.models import Booking, Profile, Property
from homeaway.utils.totals import calculate_totals

DESCRIPTION = (
    'A quiet cabin by the lake with a wood stove, '
    'a hot tub and a view over the forest.'
)


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(app):
    """Bearer headers for a token the identity provider would issue."""
    def _make(auth_id='user_guest', **claims):
        claims.setdefault('email', f'{auth_id}@example.com')
        token = create_access_token(identity=auth_id, additional_claims=claims)
        return {'Authorization': f'Bearer {token}'}
    return _make


@pytest.fixture
def profile_factory(app):
    def _create(auth_id='user_guest', **kwargs):
        kwargs.setdefault('first_name', 'Guest')
        kwargs.setdefault('last_name', 'User')
        kwargs.setdefault('username', auth_id)
        kwargs.setdefault('email', f'{auth_id}@example.com')
        profile = Profile(auth_id=auth_id, **kwargs)
        db.session.add(profile)
        db.session.commit()
        return profile
    return _create


@pytest.fixture
def guest(profile_factory):
    return profile_factory('user_guest')


@pytest.fixture
def host(profile_factory):
    return profile_factory('user_host', first_name='Hosty', last_name='Owner')


@pytest.fixture
def property_factory(app):
    def _create(owner, **kwargs):
        kwargs.setdefault('name', 'Cabin in Latvia')
        kwargs.setdefault('tagline', 'Stay Calm, StayZen!')
        kwargs.setdefault('category', 'cabin')
        kwargs.setdefault('image', 'https://example.com/cabin.jpg')
        kwargs.setdefault('country', 'LV')
        kwargs.setdefault('description', DESCRIPTION)
        kwargs.setdefault('price', 100)
        kwargs.setdefault('guests', 4)
        kwargs.setdefault('bedrooms', 2)
        kwargs.setdefault('beds', 3)
        kwargs.setdefault('baths', 1)
        kwargs.setdefault('amenities', ['wifi', 'sauna'])
        property = Property(profile_id=owner.id, **kwargs)
        db.session.add(property)
        db.session.commit()
        return property
    return _create


@pytest.fixture
def listing(host, property_factory):
    return property_factory(host)


@pytest.fixture
def booking_factory(app):
    def _create(property, profile, check_in, check_out, payment_status=True, **kwargs):
        totals = calculate_totals(property.price, check_in, check_out)
        booking = Booking(
            property_id=property.id,
            profile_id=profile.id,
            check_in=check_in,
            check_out=check_out,
            payment_status=payment_status,
            **totals,
            **kwargs
        )
        db.session.add(booking)
        db.session.commit()
        return booking
    return _create
