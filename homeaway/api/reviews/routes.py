"""
Reviews Blueprint
"""

from flask import Blueprint, current_app, g, jsonify, request
from sqlalchemy.exc import IntegrityError
from extensions import db
from homeaway.models.property import Property
from homeaway.models.review import Review
from homeaway.utils.decorators import profile_required
from homeaway.utils.schemas import ReviewSchema, SchemaError, validate_with_schema

reviews_bp = Blueprint('reviews', __name__)


@reviews_bp.route('/', methods=['POST'])
@profile_required()
def create_review():
    """Create a review for a property"""
    try:
        data = validate_with_schema(ReviewSchema, request.get_json(silent=True))

        property = db.session.get(Property, data.property_id)
        if not property:
            return jsonify({'error': 'Property not found'}), 404

        if property.profile_id == g.profile.id:
            return jsonify({'error': 'Owners cannot review their own property'}), 403

        existing_review = Review.query.filter_by(
            property_id=data.property_id,
            profile_id=g.profile.id
        ).first()
        if existing_review:
            return jsonify({'error': 'You have already reviewed this property'}), 409

        review = Review(profile_id=g.profile.id, **data.model_dump())

        db.session.add(review)
        db.session.commit()

        return jsonify({
            'message': 'Review submitted successfully',
            'review': review.to_dict(include_profile=True)
        }), 201

    except SchemaError as e:
        return jsonify({'error': str(e)}), 400
    except IntegrityError:
        db.session.rollback()
        return jsonify({'error': 'You have already reviewed this property'}), 409
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f'Create review error: {str(e)}')
        return jsonify({'error': str(e)}), 500


@reviews_bp.route('/property/<int:property_id>', methods=['GET'])
def get_property_reviews(property_id):
    """Get all reviews for a property, newest first"""
    reviews = Review.query.filter_by(property_id=property_id) \
        .order_by(Review.created_at.desc(), Review.id.desc()).all()

    return jsonify({
        'reviews': [review.to_dict(include_profile=True) for review in reviews]
    }), 200


@reviews_bp.route('/property/<int:property_id>/mine', methods=['GET'])
@profile_required()
def get_my_property_review(property_id):
    """Caller's review of a property, used to hide the review form"""
    review = Review.query.filter_by(property_id=property_id, profile_id=g.profile.id).first()

    return jsonify({'review': review.to_dict() if review else None}), 200


@reviews_bp.route('/me', methods=['GET'])
@profile_required()
def get_my_reviews():
    reviews = Review.query.filter_by(profile_id=g.profile.id) \
        .order_by(Review.created_at.desc(), Review.id.desc()).all()

    return jsonify({
        'reviews': [review.to_dict(include_property=True) for review in reviews]
    }), 200


@reviews_bp.route('/<int:review_id>', methods=['DELETE'])
@profile_required()
def delete_review(review_id):
    """Delete one of the caller's reviews"""
    try:
        review = Review.query.filter_by(id=review_id, profile_id=g.profile.id).first()
        if not review:
            return jsonify({'error': 'Review not found'}), 404

        db.session.delete(review)
        db.session.commit()

        return jsonify({'message': 'Review deleted'}), 200

    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f'Delete review error: {str(e)}')
        return jsonify({'error': str(e)}), 500
