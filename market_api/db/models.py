from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text, Boolean
from sqlalchemy.orm import relationship
from datetime import datetime
from market_api.db.base import Base

class User(Base):
	__tablename__ = "users"

	id = Column(Integer, primary_key=True, index=True)
	email = Column(String, unique=True, index=True, nullable=False)
	password_hash = Column(String, nullable=False)
	created_at = Column(DateTime, default=datetime.utcnow)

	items = relationship("Item", back_populates="owner")

	def __repr__(self):
		return f"<User(id={self.id}, email={self.email})>"

class Item(Base):
	__tablename__ = "items"

	id = Column(Integer, primary_key=True, index=True)
	name = Column(String, nullable=False)
	price = Column(Integer, nullable=False)
	description = Column(Text, nullable=True)
	sold_out = Column(Boolean, nullable=False, default=False)
	owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
	created_at = Column(DateTime, default=datetime.utcnow)
	updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

	owner = relationship("User", back_populates="items")

	def __repr__(self):
		return f"<Item(id={self.id}, name={self.name}, owner_id={self.owner_id})>"
