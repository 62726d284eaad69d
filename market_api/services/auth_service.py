from jose import JWTError

from market_api.core.errors import AuthError, ValidationError
from market_api.core.security import (
	ACCESS_TOKEN_TYPE,
	create_access_token,
	decode_token,
	hash_password,
	verify_password,
	dummy_verify_password,
)
from market_api.db.models import User
from market_api.repositories.user_repository import UserRepository


class AuthService:
	def __init__(self, users: UserRepository):
		self.users = users

	def signup(self, email: str, password: str) -> User:
		email = email.lower()
		if self.users.find_by_email(email):
			raise ValidationError("Email already registered")
		user = User(email=email, password_hash=hash_password(password))
		return self.users.create(user)

	def login(self, email: str, password: str) -> str:
		"""Return a signed access token; unknown email and wrong password fail alike."""
		user = self.users.find_by_email(email.lower())
		if not user:
			# spend the same bcrypt time as a real check so response timing does not reveal the email
			dummy_verify_password()
			raise AuthError("Invalid credentials")
		if not verify_password(password, user.password_hash):
			raise AuthError("Invalid credentials")
		return create_access_token(user.id)

	def resolve_token(self, token: str) -> User:
		try:
			payload = decode_token(token)
		except JWTError:
			raise AuthError("Invalid or expired token")

		if payload.get("type") != ACCESS_TOKEN_TYPE:
			raise AuthError("Invalid token type")
		try:
			user_id = int(payload.get("sub"))
		except (TypeError, ValueError):
			raise AuthError("Invalid token")

		user = self.users.find_by_id(user_id)
		if not user:
			raise AuthError("User not found")
		return user
