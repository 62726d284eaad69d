from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, status

from market_api.db.models import User
from market_api.dependencies import get_current_user, get_item_service
from market_api.schemas.items import (
	INT32_MAX, ItemCreate, ItemUpdate, ItemOut,
	ItemResponse, ItemListResponse, MessageResponse,
)
from market_api.services.item_service import ItemService
from market_api.core.logging import log_event, request_id

router = APIRouter(prefix="/items", tags=["items"])

ItemId = Annotated[int, Path(ge=1, le=INT32_MAX)]

@router.get("", response_model=ItemListResponse)
def list_items(items: ItemService = Depends(get_item_service)):
	return {"data": [ItemOut.model_validate(item) for item in items.find_all()]}

# declared before /{item_id} so "mine" is not parsed as an id
@router.get("/mine", response_model=ItemListResponse)
def list_my_items(
	items: ItemService = Depends(get_item_service),
	user: User = Depends(get_current_user),
):
	return {"data": [ItemOut.model_validate(item) for item in items.find_mine(user.id)]}

@router.get("/{item_id}", response_model=ItemResponse)
def get_item(
	item_id: ItemId,
	items: ItemService = Depends(get_item_service),
	user: User = Depends(get_current_user),
):
	return {"data": ItemOut.model_validate(items.find_by_id(item_id, user.id))}

@router.post("", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
def create_item(
	request: Request,
	payload: ItemCreate,
	items: ItemService = Depends(get_item_service),
	user: User = Depends(get_current_user),
):
	item = items.create(payload, user.id)
	log_event("item_created", item_id=item.id, owner_id=user.id, request_id=request_id(request))
	return {"data": ItemOut.model_validate(item)}

@router.put("/{item_id}", response_model=ItemResponse)
def update_item(
	request: Request,
	item_id: ItemId,
	payload: ItemUpdate,
	items: ItemService = Depends(get_item_service),
	user: User = Depends(get_current_user),
):
	item = items.update(item_id, user.id, payload)
	log_event(
		"item_updated",
		item_id=item.id,
		fields=sorted(payload.model_fields_set),
		owner_id=user.id,
		request_id=request_id(request),
	)
	return {"data": ItemOut.model_validate(item)}

@router.delete("/{item_id}", response_model=MessageResponse)
def delete_item(
	request: Request,
	item_id: ItemId,
	items: ItemService = Depends(get_item_service),
	user: User = Depends(get_current_user),
):
	items.delete(item_id, user.id)
	log_event("item_deleted", item_id=item_id, owner_id=user.id, request_id=request_id(request))
	return {"data": "Item deleted"}
