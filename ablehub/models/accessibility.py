import uuid
from ablehub.extensions import db
from ablehub.models.user import utcnow

# Model kolonu -> JSON alan adı
FLAG_FIELDS = {
    'voice_navigation': 'voiceNavigation',
    'screen_reader': 'screenReader',
    'high_contrast': 'highContrast',
    'large_text': 'largeText',
    'keyboard_nav': 'keyboardNav',
}


class AccessibilitySettings(db.Model):
    __tablename__ = 'accessibility_settings'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(
        db.String(128),
        db.ForeignKey('users.id', ondelete='CASCADE', onupdate='CASCADE'),
        unique=True,
        nullable=False,
    )

    voice_navigation = db.Column(db.Boolean, nullable=False, default=False)
    screen_reader = db.Column(db.Boolean, nullable=False, default=False)
    high_contrast = db.Column(db.Boolean, nullable=False, default=False)
    large_text = db.Column(db.Boolean, nullable=False, default=False)
    keyboard_nav = db.Column(db.Boolean, nullable=False, default=False)

    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    user = db.relationship('User', back_populates='accessibility_settings')

    def flags(self):
        return {column: bool(getattr(self, column)) for column in FLAG_FIELDS}

    def apply_flags(self, flags):
        for column in FLAG_FIELDS:
            setattr(self, column, bool(flags[column]))

    def to_dict(self):
        body = {
            "id": self.id,
            "userId": self.user_id,
        }
        for column, key in FLAG_FIELDS.items():
            body[key] = bool(getattr(self, column))
        body["createdAt"] = self.created_at.isoformat()
        body["updatedAt"] = self.updated_at.isoformat()
        return body

    def __repr__(self):
        return f'<AccessibilitySettings {self.user_id}>'
