from abc import ABC, abstractmethod

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from market_api.core.errors import ValidationError
from market_api.db.models import User


class UserRepository(ABC):
	@abstractmethod
	def find_by_email(self, email: str) -> User | None:
		...

	@abstractmethod
	def find_by_id(self, user_id: int) -> User | None:
		...

	@abstractmethod
	def create(self, user: User) -> User:
		"""Raises ValidationError if the email is already taken."""


class UserDBRepository(UserRepository):
	def __init__(self, db: Session):
		self.db = db

	def find_by_email(self, email: str) -> User | None:
		return self.db.query(User).filter(User.email == email).first()

	def find_by_id(self, user_id: int) -> User | None:
		return self.db.query(User).filter(User.id == user_id).first()

	def create(self, user: User) -> User:
		self.db.add(user)
		try:
			self.db.commit()
		except IntegrityError:
			# lost a race with a concurrent signup for the same email
			self.db.rollback()
			raise ValidationError("Email already registered")
		self.db.refresh(user)
		return user
