"""
Users API: POST /api/users (register), POST /api/users/login, GET /api/users/{id}.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError

from app.api.deps import get_storage
from app.database import MAX_DB_INT
from app.schemas.user import UserCreateRequest, UserResponse
from app.services.auth import hash_password, verify_password
from app.services.storage import Storage

router = APIRouter(prefix="/api/users", tags=["users"])
logger = logging.getLogger(__name__)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(data: UserCreateRequest, storage: Storage = Depends(get_storage)):
    if storage.get_user_by_username(data.username):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username already taken")
    try:
        user = storage.create_user(data.username, hash_password(data.password))
    except IntegrityError as e:
        storage.db.rollback()
        logger.warning("Create user IntegrityError: %s", e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username already taken")
    return UserResponse(id=user.id, username=user.username)


@router.post("/login", response_model=UserResponse)
def login(data: UserCreateRequest, storage: Storage = Depends(get_storage)):
    user = storage.get_user_by_username(data.username)
    if not user or not verify_password(data.password, user.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password")
    return UserResponse(id=user.id, username=user.username)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, storage: Storage = Depends(get_storage)):
    user = storage.get_user(user_id) if 1 <= user_id <= MAX_DB_INT else None
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserResponse(id=user.id, username=user.username)
