"""
User repository contract.

Only the shape is defined here. Validation works on ``User`` values no
matter how they were loaded, so no implementation ships with the package.
"""

from typing import List, Optional, Protocol, runtime_checkable

from orderguard.schemas.user import User


@runtime_checkable
class UserRepository(Protocol):
    """Async access to stored users.

    Lookups and updates return None when the user does not exist; delete
    returns whether a user was removed.
    """

    async def find_all(self) -> List[User]:
        ...

    async def find_by_id(self, user_id: int) -> Optional[User]:
        ...

    async def create(self, user: User) -> User:
        ...

    async def update(self, user: User) -> Optional[User]:
        ...

    async def delete(self, user_id: int) -> bool:
        ...
