from market_api.core.errors import NotFoundError
from market_api.db.models import Item
from market_api.repositories.item_repository import ItemRepository
from market_api.schemas.items import ItemCreate, ItemUpdate


class ItemService:
	"""Item use cases. Everything except the public listing is scoped to the owner,
	and someone else's item is reported exactly like a missing one."""

	def __init__(self, repository: ItemRepository):
		self.repository = repository

	def find_all(self) -> list[Item]:
		return self.repository.find_all()

	def find_mine(self, user_id: int) -> list[Item]:
		return self.repository.find_by_owner(user_id)

	def find_by_id(self, item_id: int, user_id: int) -> Item:
		item = self.repository.find_by_id(item_id, user_id)
		if item is None:
			raise NotFoundError("Item not found")
		return item

	def create(self, payload: ItemCreate, user_id: int) -> Item:
		item = Item(
			name=payload.name,
			price=payload.price,
			description=payload.description,
			sold_out=False,
			owner_id=user_id,
		)
		return self.repository.create(item)

	def update(self, item_id: int, user_id: int, payload: ItemUpdate) -> Item:
		item = self.find_by_id(item_id, user_id)
		for key, value in payload.model_dump(exclude_unset=True).items():
			setattr(item, key, value)
		return self.repository.update(item)

	def delete(self, item_id: int, user_id: int) -> None:
		self.repository.delete(item_id, user_id)
