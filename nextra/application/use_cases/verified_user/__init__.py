from .list_users import ListVerifiedUsersUseCase
from .add_user import AddVerifiedUserUseCase
from .remove_user import RemoveVerifiedUserUseCase
from .check_user import CheckVerifiedUserUseCase

__all__ = [
    "ListVerifiedUsersUseCase",
    "AddVerifiedUserUseCase",
    "RemoveVerifiedUserUseCase",
    "CheckVerifiedUserUseCase",
]
