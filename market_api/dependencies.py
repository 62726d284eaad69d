from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from market_api.core.errors import AuthError
from market_api.db.models import User
from market_api.db.session import get_db
from market_api.repositories.item_repository import ItemDBRepository, ItemRepository
from market_api.repositories.user_repository import UserDBRepository, UserRepository
from market_api.services.auth_service import AuthService
from market_api.services.item_service import ItemService

# auto_error=False so a missing header is a 401 from our handler, not the scheme's default
security = HTTPBearer(auto_error=False)

def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
	return UserDBRepository(db)

def get_item_repository(db: Session = Depends(get_db)) -> ItemRepository:
	return ItemDBRepository(db)

def get_auth_service(users: UserRepository = Depends(get_user_repository)) -> AuthService:
	return AuthService(users)

def get_item_service(items: ItemRepository = Depends(get_item_repository)) -> ItemService:
	return ItemService(items)

def get_current_user(
	request: Request,
	creds: HTTPAuthorizationCredentials | None = Depends(security),
	auth: AuthService = Depends(get_auth_service),
) -> User:
	if creds is None:
		raise AuthError("Not authenticated")
	user = auth.resolve_token(creds.credentials)
	request.state.user = user
	return user
