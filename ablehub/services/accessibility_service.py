# ablehub/services/accessibility_service.py
import logging
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from ablehub.extensions import db
from ablehub.errors import UnauthorizedError, ValidationError, ConflictError, InternalError
from ablehub.schemas.accessibility import AccessibilityFlagsPayload, describe_errors
from ablehub.services.identity_service import IdentityProvisioner
from ablehub.services.settings_store import SettingsStore

logger = logging.getLogger(__name__)

MAX_USER_ID_LENGTH = 128


class AccessibilityService:
    def __init__(self, store=None, provisioner=None):
        self.store = store or SettingsStore()
        self.provisioner = provisioner or IdentityProvisioner()

    def handle_get(self, user_id):
        self._check_identity(user_id)
        try:
            self.provisioner.ensure_user(user_id)
            settings = self.store.get(user_id)
            if settings is None:
                try:
                    settings = self.store.create_default(user_id)
                except ConflictError:
                    settings = self.store.get(user_id)
            return settings.to_dict()
        except SQLAlchemyError as e:
            raise self._internal(e, "fetching")

    def handle_update(self, user_id, payload):
        self._check_identity(user_id)
        flags = self.validate(payload)
        try:
            self.provisioner.ensure_user(user_id)
            settings = self.store.upsert(user_id, flags)
            logger.info("Accessibility settings updated for %s", user_id)
            return settings.to_dict()
        except SQLAlchemyError as e:
            raise self._internal(e, "updating")

    @staticmethod
    def validate(payload):
        try:
            return AccessibilityFlagsPayload.model_validate(payload).to_columns()
        except PydanticValidationError as e:
            raise ValidationError(details=describe_errors(e))

    @staticmethod
    def _check_identity(user_id):
        if not isinstance(user_id, str) or not user_id.strip():
            raise UnauthorizedError()
        if len(user_id) > MAX_USER_ID_LENGTH:
            raise UnauthorizedError("Unauthorized: Invalid user ID")

    @staticmethod
    def _internal(error, action):
        db.session.rollback()
        logger.exception("Error %s accessibility settings", action)
        return InternalError(error)
