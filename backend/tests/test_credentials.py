"""Tests for the single-record credential store."""
import pytest
from society.context import AppContext
from society.models.preferences import Language
from society.services.credentials import CREDENTIALS_KEY, CredentialError, CredentialStore
from society.storage.database import ProfileStore
from society.storage.local_state import LocalStateStore


@pytest.fixture
def context(tmp_path):
    return AppContext(LocalStateStore(str(tmp_path / "state.json"))).load()


@pytest.fixture
def credentials(tmp_path, context):
    return CredentialStore(context.state, context, ProfileStore(str(tmp_path / "society.db")))


def test_register_stores_record_and_opens_session(credentials, context):
    assert not credentials.has_credentials()

    credentials.register("Treasurer", "1234", "t@example.com")

    assert credentials.has_credentials()
    assert context.session_user == "Treasurer"
    stored = context.state.get(CREDENTIALS_KEY)
    assert stored == {"userName": "Treasurer", "password": "1234", "email": "t@example.com"}


def test_register_requires_every_field(credentials):
    with pytest.raises(CredentialError) as exc:
        credentials.register("Treasurer", "", "t@example.com")
    assert exc.value.code == "empty"
    assert exc.value.message == "Please fill all fields"
    assert not credentials.has_credentials()


def test_register_overwrites_previous_record(credentials):
    credentials.register("Treasurer", "1234", "t@example.com")
    credentials.register("Secretary", "9999", "s@example.com")

    assert credentials.load().username == "Secretary"


def test_login_is_case_insensitive_on_username_only(credentials, context):
    credentials.register("Treasurer", "Pin42", "t@example.com")
    credentials.logout()

    assert credentials.login("treasurer", "Pin42") == "Treasurer"
    assert context.session_user == "Treasurer"

    credentials.logout()
    with pytest.raises(CredentialError) as exc:
        credentials.login("Treasurer", "pin42")
    assert exc.value.code == "invalid"
    assert not context.is_authenticated


def test_login_without_record_is_invalid(credentials):
    with pytest.raises(CredentialError) as exc:
        credentials.login("anyone", "1234")
    assert exc.value.code == "invalid"


def test_errors_are_localized(credentials, context):
    context.set_language(Language.BENGALI)
    with pytest.raises(CredentialError) as exc:
        credentials.login("", "")
    assert exc.value.message == "সবগুলো ঘর পূরণ করুন"


def test_reset_changes_only_the_password(credentials, context):
    credentials.register("Treasurer", "1234", "t@example.com")

    message = credentials.reset("TREASURER", "5678", "5678")

    assert message == "Pin updated successfully!"
    saved = credentials.load()
    assert saved.username == "Treasurer"
    assert saved.email == "t@example.com"
    assert saved.password == "5678"


def test_reset_rejects_mismatch_and_unknown_user(credentials):
    credentials.register("Treasurer", "1234", "t@example.com")

    with pytest.raises(CredentialError) as mismatch:
        credentials.reset("Treasurer", "5678", "8765")
    with pytest.raises(CredentialError) as unknown:
        credentials.reset("Secretary", "5678", "5678")

    assert mismatch.value.code == "mismatch"
    assert unknown.value.code == "no_user"
    assert credentials.load().password == "1234"


def test_verify_session_rechecks_the_held_session(credentials, context):
    credentials.register("Treasurer", "1234", "t@example.com")

    assert credentials.verify_session() == "Treasurer"
    assert context.session_user == "Treasurer"


def test_verify_session_never_opens_a_session(credentials, context):
    credentials.register("Treasurer", "1234", "t@example.com")
    credentials.logout()

    assert credentials.verify_session() is None
    assert not context.is_authenticated


def test_verify_session_clears_user_without_profile(credentials, context):
    context.start_session("Ghost")

    assert credentials.verify_session() is None
    assert not context.is_authenticated


def test_verify_session_without_profile_store(context):
    credentials = CredentialStore(context.state, context)
    context.start_session("Treasurer")

    assert credentials.verify_session() is None
    assert not context.is_authenticated
