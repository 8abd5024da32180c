from functools import wraps
from flask import request, jsonify
from marshmallow import ValidationError


def validate_schema(schema_class):
    """Decorator to validate request data against schema"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            schema = schema_class()
            try:
                validated_data = schema.load(request.get_json(silent=True) or {})
                request.validated_data = validated_data
                return f(*args, **kwargs)
            except ValidationError as err:
                return jsonify({'error': 'Validation error', 'messages': err.messages}), 400
        return decorated_function
    return decorator


def validate_listing_args():
    """Read listing query parameters, leaving unknown values for the service to default"""
    category = request.args.get('category') or None
    sort = request.args.get('sort', 'latest')
    order = request.args.get('order', 'desc')
    search = request.args.get('search', '').strip() or None
    return category, sort, order, search
