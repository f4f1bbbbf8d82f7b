# ablehub/services/settings_store.py
import logging
from sqlalchemy.exc import IntegrityError
from ablehub.extensions import db
from ablehub.errors import ConflictError
from ablehub.models.accessibility import AccessibilitySettings, FLAG_FIELDS
from ablehub.models.user import utcnow
from ablehub.utils.locks import keyed_lock

logger = logging.getLogger(__name__)


class SettingsStore:
    """
    Kullanıcı başına tek AccessibilitySettings satırı.

    Aynı user_id için yazmalar süreç içi bir kilit ve satır kilidi
    (SELECT ... FOR UPDATE) ile sıraya alınır; yarım kalmış/karışık
    bayrak seti hiçbir zaman kaydedilmez.
    """

    @staticmethod
    def _lock_for(user_id):
        return keyed_lock("accessibility_settings", user_id)

    def get(self, user_id):
        return AccessibilitySettings.query.filter_by(user_id=user_id).first()

    def create_default(self, user_id):
        with self._lock_for(user_id):
            if self.get(user_id) is not None:
                raise ConflictError()

            settings = AccessibilitySettings(user_id=user_id)
            settings.apply_flags({column: False for column in FLAG_FIELDS})
            db.session.add(settings)
            try:
                db.session.commit()
            except IntegrityError:
                db.session.rollback()
                # Başka bir süreç aynı anda oluşturduysa çakışma; değilse FK hatası
                if self.get(user_id) is not None:
                    raise ConflictError()
                raise

            logger.info("Default accessibility settings created for %s", user_id)
            return settings

    def upsert(self, user_id, flags):
        missing = [column for column in FLAG_FIELDS if column not in flags]
        if missing:
            raise KeyError(f"Missing flags: {', '.join(missing)}")

        with self._lock_for(user_id):
            try:
                return self._write(user_id, flags)
            except IntegrityError:
                # Insert yarışını kaybettik: mevcut satırı güncelle
                db.session.rollback()
                if self.get(user_id) is None:
                    raise
                return self._write(user_id, flags)

    def _write(self, user_id, flags):
        settings = (
            AccessibilitySettings.query
            .filter_by(user_id=user_id)
            .with_for_update()
            .first()
        )
        if settings is None:
            settings = AccessibilitySettings(user_id=user_id)
            db.session.add(settings)

        settings.apply_flags(flags)
        settings.updated_at = utcnow()
        db.session.commit()
        return settings
