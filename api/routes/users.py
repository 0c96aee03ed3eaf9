# api/routes/users.py

from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from catalog.sa.database import get_db
from catalog.sa.models import User as UserModel
from catalog.sa.repositories import UserRepository
from catalog.sa.repositories.options import UserAllOptions, UserFindOptions
from api.deps import get_current_user, require_superuser
from api.routes.params import user_all_options, user_find_options
from api.schemas import User, UserCreate

router = APIRouter(prefix="/users", tags=["users"])

@router.get("", response_model=List[User])
def get_users(
    options: UserAllOptions = Depends(user_all_options),
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    require_superuser(user, "get_users")
    return UserRepository(db).all(options)

@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(
    new_user: UserCreate,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    require_superuser(user, "create_user")
    return UserRepository(db).insert(new_user.model_dump(exclude_unset=True))

@router.get("/me", response_model=User)
def get_me(user: UserModel = Depends(get_current_user)):
    """The user owning the bearer token"""
    return user

@router.get("/exact/{username}", response_model=User)
def get_user_by_username(
    username: str,
    options: UserFindOptions = Depends(user_find_options),
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    require_superuser(user, "get_user_by_username")
    return UserRepository(db).exact(username, options)

@router.get("/{user_id}", response_model=User)
def get_user(
    user_id: int,
    options: UserFindOptions = Depends(user_find_options),
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    require_superuser(user, "get_user")
    return UserRepository(db).find(user_id, options)

@router.put("/{user_id}", response_model=User)
def update_user(
    user_id: int,
    changed: UserCreate,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Replace a user. Leave ``password`` out to keep the current one."""
    require_superuser(user, "update_user")
    return UserRepository(db).update(user_id, changed.model_dump(exclude_unset=True))

@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    require_superuser(user, "delete_user")
    UserRepository(db).remove(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
