from datetime import datetime, timedelta, timezone

from jose import jwt
from passlib.context import CryptContext

from market_api.core.config import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS)

ACCESS_TOKEN_TYPE = "access"

def _normalize_password(password: str) -> str:
	# bcrypt only considers the first 72 bytes; truncate consistently to avoid errors.
	raw = password.encode("utf-8")
	if len(raw) <= 72:
		return password
	return raw[:72].decode("utf-8", errors="ignore")

def hash_password(password: str) -> str:
	return pwd_context.hash(_normalize_password(password))

def verify_password(password: str, password_hash: str) -> bool:
	return pwd_context.verify(_normalize_password(password), password_hash)

def dummy_verify_password() -> None:
	pwd_context.dummy_verify()

def create_access_token(user_id: int, expires_delta: timedelta | None = None) -> str:
	now = datetime.now(timezone.utc)
	if expires_delta is None:
		expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRES_MIN)
	payload = {
		"sub": str(user_id),
		"type": ACCESS_TOKEN_TYPE,
		"iat": int(now.timestamp()),
		"exp": int((now + expires_delta).timestamp()),
	}
	return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALG)

def decode_token(token: str) -> dict:
	"""Verify signature, expiry and subject; raises jose.JWTError on any failure."""
	return jwt.decode(
		token,
		settings.JWT_SECRET,
		algorithms=[settings.JWT_ALG],
		options={"require_exp": True, "require_sub": True},
	)
