from flask import Blueprint, current_app, g, jsonify, request
from extensions import db
from homeaway.models.favorite import Favorite
from homeaway.models.property import Property
from homeaway.utils.decorators import profile_required

favorites_bp = Blueprint('favorites', __name__)


@favorites_bp.route('/', methods=['GET'])
@profile_required()
def get_favorites():
    properties = Property.query.join(Favorite).filter(
        Favorite.profile_id == g.profile.id
    ).order_by(Favorite.created_at.desc(), Favorite.id.desc()).all()

    return jsonify({
        'properties': [prop.to_summary() for prop in properties]
    }), 200


@favorites_bp.route('/property/<int:property_id>', methods=['GET'])
@profile_required()
def get_favorite_id(property_id):
    favorite = Favorite.query.filter_by(
        profile_id=g.profile.id,
        property_id=property_id
    ).first()

    return jsonify({'favorite_id': favorite.id if favorite else None}), 200


@favorites_bp.route('/toggle', methods=['POST'])
@profile_required()
def toggle_favorite():
    """Remove the given favorite, or add the property when no favorite_id is sent"""
    try:
        data = request.get_json(silent=True) or {}
        favorite_id = data.get('favorite_id')

        if favorite_id:
            try:
                favorite_id = int(favorite_id)
            except (TypeError, ValueError):
                return jsonify({'error': 'favorite_id must be an integer'}), 400

            favorite =Favorite.query.filter_by(id=favorite_id, profile_id=g.profile.id).first()
            if not favorite:
                return jsonify({'error': 'Favorite not found'}), 404

            db.session.delete(favorite)
            db.session.commit()
            return jsonify({'message': 'Favorite removed', 'favorite_id': None}), 200

        if not data.get('property_id'):
            return jsonify({'error': 'property_id is required'}), 400

        try:
            property_id = int(data['property_id'])
        except (TypeError, ValueError):
            return jsonify({'error': 'property_id must be an integer'}), 400

        if not db.session.get(Property, property_id):
            return jsonify({'error': 'Property not found'}), 404

        favorite = Favorite.query.filter_by(profile_id=g.profile.id, property_id=property_id).first()
        if not favorite:
            favorite = Favorite(profile_id=g.profile.id, property_id=property_id)
            db.session.add(favorite)
            db.session.commit()

        return jsonify({'message': 'Favorite added', 'favorite_id': favorite.id}), 200

    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f'Toggle favorite error: {str(e)}')
        return jsonify({'error': str(e)}), 500
