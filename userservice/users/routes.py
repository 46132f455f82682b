from typing import Any, Optional

from fastapi import APIRouter, Body, Depends

from userservice.config.dependencies import get_user_service
from userservice.users.schemas import UserCreate
from userservice.users.services import UserService

router = APIRouter(tags=["users"])


@router.get("")
async def list_users_endpoint(service: UserService = Depends(get_user_service)):
    users = await service.list_users()
    return {"success": True, "count": len(users), "data": users}


@router.get("/{user_id}")
async def get_user_endpoint(user_id: str, service: UserService = Depends(get_user_service)):
    user = await service.get_user(user_id)
    return {"success": True, "data": user}


@router.post("", status_code=201)
async def create_user_endpoint(
    payload: Optional[UserCreate] = Body(default=None),
    service: UserService = Depends(get_user_service),
):
    user = await service.create_user(payload)
    return {"success": True, "data": user}


# The body is validated by the service, after the id lookup
@router.put("/{user_id}")
async def update_user_endpoint(
    user_id: str,
    payload: Any = Body(default=None),
    service: UserService = Depends(get_user_service),
):
    user = await service.update_user(user_id, payload)
    return {"success": True, "data": user}


@router.delete("/{user_id}")
async def delete_user_endpoint(user_id: str, service: UserService = Depends(get_user_service)):
    await service.delete_user(user_id)
    return {"success": True, "message": "User deleted successfully"}
