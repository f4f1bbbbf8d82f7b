import pytest
from flask_jwt_extended import create_access_token
from ablehub import create_app
from ablehub.config import TestingConfig
from ablehub.extensions import db
from ablehub.models import User

ALL_FALSE = {
    "voiceNavigation": False,
    "screenReader": False,
    "highContrast": False,
    "largeText": False,
    "keyboardNav": False,
}


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield app


@pytest.fixture
def make_user(app_ctx):
    def _make(user_id="u1"):
        user = User(id=user_id, email=f"{user_id}@example.com")
        db.session.add(user)
        db.session.commit()
        return user
    return _make


@pytest.fixture
def auth_headers(app):
    def _headers(user_id):
        with app.app_context():
            token = create_access_token(identity=user_id)
        return {"Authorization": f"Bearer {token}"}
    return _headers
