import threading
import pytest
from ablehub import create_app
from ablehub.config import TestingConfig
from ablehub.extensions import db
from ablehub.models import AccessibilitySettings, FLAG_FIELDS
from ablehub.services.accessibility_service import AccessibilityService

A = {"voiceNavigation": True, "screenReader": False, "highContrast": True, "largeText": False, "keyboardNav": True}
B = {"voiceNavigation": False, "screenReader": True, "highContrast": False, "largeText": True, "keyboardNav": False}


@pytest.fixture
def file_app(tmp_path):
    class FileDbConfig(TestingConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'concurrency.db'}"
        SQLALCHEMY_ENGINE_OPTIONS = {"connect_args": {"check_same_thread": False, "timeout": 30}}

    app = create_app(FileDbConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()
        db.engine.dispose()


def _run_writers(app, payloads):
    errors = []
    barrier = threading.Barrier(len(payloads))

    def writer(payload):
        with app.app_context():
            try:
                barrier.wait()
                AccessibilityService().handle_update("u1", payload)
            except Exception as e:  # thread içindeki hatayı teste taşı
                errors.append(e)

    threads = [threading.Thread(target=writer, args=(p,)) for p in payloads]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    return errors


@pytest.mark.parametrize("round_", range(5))
def test_concurrent_writes_never_mix(file_app, round_) -> None:
    with file_app.app_context():
        AccessibilityService().handle_get("u1")

    errors = _run_writers(file_app, [A, B, A, B])
    assert errors == []

    with file_app.app_context():
        rows = AccessibilitySettings.query.filter_by(user_id="u1").all()
        assert len(rows) == 1
        flags = rows[0].to_dict()
        final = {key: flags[key] for key in FLAG_FIELDS.values()}
        assert final in (A, B)


def test_concurrent_first_reads_provision_one_record(file_app) -> None:
    results = []
    barrier = threading.Barrier(4)

    def reader():
        with file_app.app_context():
            barrier.wait()
            results.append(AccessibilityService().handle_get("newcomer")["id"])

    threads = [threading.Thread(target=reader) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 4
    assert len(set(results)) == 1
    with file_app.app_context():
        assert AccessibilitySettings.query.filter_by(user_id="newcomer").count() == 1
