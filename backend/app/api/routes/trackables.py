"""
CRUD routes shared by budgets and goals.
"""
from typing import Type
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.models.user import User
from app.schemas.common import MessageResponse
from app.schemas.trackable import TrackableCreate, TrackableQuery, TrackableUpdate
from app.api.dependencies import get_current_user, query_params
from app.services import trackable_service
from app.services.trackable_service import TrackableKind


def build_trackable_router(
    kind: TrackableKind,
    prefix: str,
    create_schema: Type[TrackableCreate],
    update_schema: Type[TrackableUpdate],
    item_schema: Type[BaseModel],
    detail_schema: Type[BaseModel],
    list_schema: Type[BaseModel],
) -> APIRouter:
    """Router with list/create/detail/update/delete for one trackable kind."""
    router = APIRouter(prefix=prefix, tags=[prefix.strip("/")])
    label = kind.label.lower()

    @router.get("", response_model=list_schema, summary=f"List {label}s")
    async def list_items(
        current_user: User = Depends(get_current_user),
        query: TrackableQuery = Depends(query_params(TrackableQuery)),
        db: Session = Depends(get_db)
    ):
        """Filtered, paginated list with progress metrics, newest first."""
        return trackable_service.list_trackables(db, kind, current_user.id, query)

    @router.post("", response_model=item_schema, status_code=status.HTTP_201_CREATED, summary=f"Create {label}")
    async def create_item(
        data: create_schema,
        current_user: User = Depends(get_current_user),
        db: Session = Depends(get_db)
    ):
        return trackable_service.create_trackable(db, kind, current_user.id, data)

    @router.get("/{item_id}", response_model=detail_schema, summary=f"Get {label}")
    async def get_item(
        item_id: str,
        current_user: User = Depends(get_current_user),
        db: Session = Depends(get_db)
    ):
        """Single record with metrics and its linked expenses."""
        return trackable_service.trackable_detail(db, kind, current_user.id, item_id)

    @router.put("/{item_id}", response_model=item_schema, summary=f"Update {label}")
    async def update_item(
        item_id: str,
        data: update_schema,
        current_user: User = Depends(get_current_user),
        db: Session = Depends(get_db)
    ):
        return trackable_service.update_trackable(db, kind, current_user.id, item_id, data)

    @router.delete("/{item_id}", response_model=MessageResponse, summary=f"Delete {label}")
    async def delete_item(
        item_id: str,
        current_user: User = Depends(get_current_user),
        db: Session = Depends(get_db)
    ):
        """Delete the record; linked expenses are unlinked, not deleted."""
        trackable_service.delete_trackable(db, kind, current_user.id, item_id)
        return {"message": f"{kind.label} deleted successfully"}

    return router
