"""
Tests for the pawmart command-line entry point.
"""

import pytest

from pawmart.cli import main
from pawmart.db.session import session_scope
from pawmart.schemas.user_profile import UserCreate
from pawmart.services import UserService


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'cli.db'}"


def test_seed_fills_empty_catalog_once(database_url, capsys):
    assert main(["--database-url", database_url, "seed"]) == 0
    assert "Created 5 pets and 7 products" in capsys.readouterr().out

    assert main(["--database-url", database_url, "seed"]) == 0
    assert "Created 0 pets and 0 products" in capsys.readouterr().out


def test_init_db(database_url):
    assert main(["--database-url", database_url, "init-db"]) == 0


def test_recommend_for_user(database_url, capsys):
    main(["--database-url", database_url, "seed"])
    with session_scope() as session:
        user = UserService(session).create_user(UserCreate(name="Jane", email="jane@example.com"))
    capsys.readouterr()

    assert main(["--database-url", database_url, "recommend", "--user-id", user.id]) == 0

    out = capsys.readouterr().out
    assert "5 available pets" in out
    assert out.count("*") == 3


def test_recommend_unknown_user(database_url):
    assert main(["--database-url", database_url, "recommend", "--user-id", "missing"]) == 1


def test_command_is_required():
    with pytest.raises(SystemExit):
        main([])


def test_create_user_prints_id(database_url, capsys):
    assert main(["--database-url", database_url, "create-user", "--name", "Jane", "--email", "jane@example.com",
                 "--city", "Dhaka"]) == 0
    user_id = capsys.readouterr().out.strip()

    with session_scope() as session:
        user = UserService(session).get_user(user_id)
    assert user.name == "Jane"
    assert user.city == "Dhaka"


def test_create_user_duplicate_email(database_url):
    args = ["--database-url", database_url, "create-user", "--name", "Jane", "--email", "jane@example.com"]
    assert main(args) == 0
    assert main(args) == 1


def test_create_user_invalid_email(database_url):
    assert main(["--database-url", database_url, "create-user", "--name", "Jane", "--email", "nope"]) == 1
