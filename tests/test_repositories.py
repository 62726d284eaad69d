import pytest

from market_api.core.errors import NotFoundError, ValidationError
from market_api.db.models import Item, User
from market_api.repositories.item_repository import ItemDBRepository
from market_api.repositories.user_repository import UserDBRepository


@pytest.fixture
def owners(db_session):
	users = UserDBRepository(db_session)
	alice = users.create(User(email="alice@x.com", password_hash="h"))
	bob = users.create(User(email="bob@x.com", password_hash="h"))
	return alice, bob


def test_user_create_translates_unique_violation(db_session):
	users = UserDBRepository(db_session)
	users.create(User(email="a@x.com", password_hash="h"))

	with pytest.raises(ValidationError):
		users.create(User(email="a@x.com", password_hash="h2"))

	# session is usable again after the rollback
	assert users.find_by_email("a@x.com").password_hash == "h"
	assert db_session.query(User).count() == 1


def test_find_by_id_filters_on_owner(db_session, owners):
	alice, bob = owners
	repo = ItemDBRepository(db_session)
	item = repo.create(Item(name="X", price=5, owner_id=alice.id))

	assert repo.find_by_id(item.id, alice.id).id == item.id
	assert repo.find_by_id(item.id, bob.id) is None


def test_new_item_gets_defaults(db_session, owners):
	alice, _ = owners
	item = ItemDBRepository(db_session).create(Item(name="X", price=5, owner_id=alice.id))

	assert item.sold_out is False
	assert item.created_at is not None


def test_delete_with_no_matching_row_raises_not_found(db_session, owners):
	alice, bob = owners
	repo = ItemDBRepository(db_session)
	# the instance is expired after the delete commits, so keep the id
	item_id = repo.create(Item(name="X", price=5, owner_id=alice.id)).id

	with pytest.raises(NotFoundError):
		repo.delete(item_id, bob.id)
	assert repo.find_by_id(item_id, alice.id) is not None

	repo.delete(item_id, alice.id)
	with pytest.raises(NotFoundError):
		repo.delete(item_id, alice.id)
	assert repo.find_by_id(item_id, alice.id) is None


def test_find_by_owner_and_find_all(db_session, owners):
	alice, bob = owners
	repo = ItemDBRepository(db_session)
	repo.create(Item(name="a1", price=1, owner_id=alice.id))
	repo.create(Item(name="b1", price=2, owner_id=bob.id))
	repo.create(Item(name="a2", price=3, owner_id=alice.id))

	assert [i.name for i in repo.find_by_owner(alice.id)] == ["a1", "a2"]
	assert [i.name for i in repo.find_all()] == ["a1", "b1", "a2"]
