from flask import Blueprint, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from ablehub.extensions import db

health_bp = Blueprint('health', __name__, url_prefix='/api')


@health_bp.route('/health', methods=['GET'])
def health_check():
    """
    Servis Durumu
    ---
    tags:
      - System
    responses:
      200:
        description: Servis ayakta
    """
    try:
        db.session.execute(text('SELECT 1'))
        db_status = 'connected'
    except SQLAlchemyError as e:
        db.session.rollback()
        db_status = f'error: {e}'
    return jsonify({'status': 'healthy', 'database': db_status}), 200
