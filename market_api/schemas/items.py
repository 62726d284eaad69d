from typing import Optional

from pydantic import BaseModel, Field, field_validator

# items.price and items.id are 32-bit INTEGER columns
INT32_MAX = 2**31 - 1

class ItemCreate(BaseModel):
	name: str = Field(min_length=1, max_length=100)
	price: int = Field(ge=0, le=INT32_MAX)
	description: Optional[str] = None

class ItemUpdate(BaseModel):
	"""Partial update: only fields present in the request body are applied."""
	name: Optional[str] = Field(None, min_length=1, max_length=100)
	price: Optional[int] = Field(None, ge=0, le=INT32_MAX)
	description: Optional[str] = None
	sold_out: Optional[bool] = None

	@field_validator("name", "price", "sold_out")
	@classmethod
	def not_null(cls, v):
		# Omit the field to keep the stored value; null is not a value for these columns.
		if v is None:
			raise ValueError("may be omitted but not null")
		return v

class ItemOut(BaseModel):
	id: int
	name: str
	price: int
	description: Optional[str] = None
	sold_out: bool
	owner_id: int

	class Config:
		from_attributes = True

class ItemResponse(BaseModel):
	data: ItemOut

class ItemListResponse(BaseModel):
	data: list[ItemOut]

class MessageResponse(BaseModel):
	data: str
