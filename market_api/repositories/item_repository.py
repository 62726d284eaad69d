from abc import ABC, abstractmethod

from sqlalchemy.orm import Session

from market_api.core.errors import NotFoundError
from market_api.db.models import Item


class ItemRepository(ABC):
	"""Storage for items. Lookups by id are always scoped to an owner."""

	@abstractmethod
	def find_all(self) -> list[Item]:
		...

	@abstractmethod
	def find_by_owner(self, user_id: int) -> list[Item]:
		...

	@abstractmethod
	def find_by_id(self, item_id: int, user_id: int) -> Item | None:
		...

	@abstractmethod
	def create(self, item: Item) -> Item:
		...

	@abstractmethod
	def update(self, item: Item) -> Item:
		...

	@abstractmethod
	def delete(self, item_id: int, user_id: int) -> None:
		"""Raises NotFoundError when no row matched."""


class ItemDBRepository(ItemRepository):
	def __init__(self, db: Session):
		self.db = db

	def find_all(self) -> list[Item]:
		return self.db.query(Item).order_by(Item.id.asc()).all()

	def find_by_owner(self, user_id: int) -> list[Item]:
		return self.db.query(Item).filter(Item.owner_id == user_id).order_by(Item.id.asc()).all()

	def find_by_id(self, item_id: int, user_id: int) -> Item | None:
		return self.db.query(Item).filter(Item.id == item_id, Item.owner_id == user_id).first()

	def create(self, item: Item) -> Item:
		self.db.add(item)
		self.db.commit()
		self.db.refresh(item)
		return item

	def update(self, item: Item) -> Item:
		self.db.add(item)
		self.db.commit()
		self.db.refresh(item)
		return item

	def delete(self, item_id: int, user_id: int) -> None:
		deleted = (
			self.db.query(Item)
			.filter(Item.id == item_id, Item.owner_id == user_id)
			.delete(synchronize_session=False)
		)
		if deleted == 0:
			self.db.rollback()
			raise NotFoundError("Item not found")
		self.db.commit()
