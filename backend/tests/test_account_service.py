from concurrent.futures import ThreadPoolExecutor

import pytest

from app.core.errors import DuplicateError, InvalidCredentialsError, ValidationError
from app.models.account import Account
from app.services.account_service import AccountService


def test_register_returns_public_account():
    service = AccountService()

    account = service.register("alice", "pw123")

    assert account.model_dump() == {"id": 1, "username": "alice"}
    assert [a.model_dump() for a in service.list_accounts()] == [
        {"id": 1, "username": "alice"}
    ]


@pytest.mark.parametrize("username, password", [("", "pw123"), ("bob", ""), (None, "x")])
def test_register_requires_username_and_password(username, password):
    service = AccountService()

    with pytest.raises(ValidationError, match="Username and password required"):
        service.register(username, password)
    assert service.list_accounts() == []


def test_register_duplicate_keeps_first_account():
    service = AccountService()
    service.register("alice", "pw123")

    with pytest.raises(DuplicateError, match="User already exists"):
        service.register("alice", "other")

    assert len(service.list_accounts()) == 1
    with pytest.raises(InvalidCredentialsError):
        service.login("alice", "other")


def test_usernames_are_case_sensitive():
    service = AccountService()
    service.register("alice", "pw123")

    assert service.register("Alice", "pw123").id == 2


def test_ids_increase_by_one_from_one():
    service = AccountService()

    ids = [service.register(name, "pw").id for name in ("a", "b", "c", "d")]

    assert ids == [1, 2, 3, 4]


def test_login_with_exact_pair_returns_token():
    service = AccountService()
    service.register("special", "p@$$w0rd!")

    result = service.login("special", "p@$$w0rd!")

    assert result.model_dump() == {
        "id": 1,
        "username": "special",
        "token": "fake-jwt-token",
    }


def test_login_rejects_wrong_password_and_unknown_user():
    service = AccountService()
    service.register("alice", "pw123")

    with pytest.raises(InvalidCredentialsError, match="Invalid credentials"):
        service.login("alice", "wrong")
    with pytest.raises(InvalidCredentialsError):
        service.login("bob", "pw123")


def test_login_uses_injected_token_issuer():
    class CountingIssuer:
        def issue(self, account: Account) -> str:
            return f"token-{account.id}"

    service = AccountService(token_issuer=CountingIssuer())
    service.register("alice", "pw123")

    assert service.login("alice", "pw123").token == "token-1"


def test_list_accounts_never_exposes_passwords():
    service = AccountService()
    service.register("alice", "pw123")
    service.register("bob", "pw456")

    for account in service.list_accounts():
        assert "password" not in account.model_dump()


def test_concurrent_registration_of_same_username_creates_one_account():
    service = AccountService()

    def attempt(_):
        try:
            service.register("alice", "pw123")
            return True
        except DuplicateError:
            return False

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(attempt, range(32)))

    assert results.count(True) == 1
    assert [a.id for a in service.list_accounts()] == [1]
