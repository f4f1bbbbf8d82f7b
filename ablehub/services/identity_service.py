import logging
from flask import request, current_app
from flask_jwt_extended import verify_jwt_in_request, get_jwt_identity
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError
from sqlalchemy.exc import IntegrityError
from ablehub.extensions import db
from ablehub.errors import UnauthorizedError
from ablehub.models.user import User
from ablehub.utils.locks import keyed_lock

logger = logging.getLogger(__name__)

USER_ID_HEADER = 'X-User-Id'


def resolve_identity():
    """
    İsteğin sahibini belirler.

    Önce JWT (Authorization: Bearer ...) kimliği, sonra ALLOW_HEADER_IDENTITY
    açıksa X-User-Id header'ı. Hiçbiri yoksa UnauthorizedError.
    """
    try:
        verify_jwt_in_request(optional=True)
        identity = get_jwt_identity()
    except (JWTExtendedException, PyJWTError) as e:
        logger.warning("Rejected token: %s", e)
        raise UnauthorizedError("Unauthorized: Invalid token")

    if identity:
        return str(identity)

    if current_app.config.get('ALLOW_HEADER_IDENTITY'):
        header_value = (request.headers.get(USER_ID_HEADER) or '').strip()
        if header_value:
            return header_value

    raise UnauthorizedError()


class IdentityProvisioner:
    """Kimlik kayıtlarının sahibi. Settings servisi User satırı oluşturmaz, bunu çağırır."""

    def __init__(self, auto_provision=None):
        self._auto_provision = auto_provision

    @property
    def auto_provision(self):
        if self._auto_provision is not None:
            return self._auto_provision
        return bool(current_app.config.get('AUTO_PROVISION_USERS', False))

    def ensure_user(self, user_id):
        user = db.session.get(User, user_id)
        if user is not None:
            return user

        if not self.auto_provision:
            raise UnauthorizedError("Unauthorized: Unknown user")

        with keyed_lock("users", user_id):
            return self._provision(user_id)

    def _provision(self, user_id):
        user = db.session.get(User, user_id)
        if user is not None:
            return user

        # Sadece geliştirme için: gerçek kullanıcı oluşturma auth tarafının işi
        logger.warning("Provisioning placeholder user %s", user_id)
        user = User(id=user_id, email=f"{user_id}@local")
        db.session.add(user)
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            user = db.session.get(User, user_id)
            if user is None:
                raise
        return user
