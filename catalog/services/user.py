"""
User service containing business logic layer
"""

from typing import Any, Dict, List, Optional

from catalog.core.logger import logger
from catalog.repositories.user import UserRepository
from catalog.schemas.user import UserCreate, UserSaveResponse

USER_EXISTS_MESSAGE = "User already exists"
USER_SAVED_MESSAGE = "User saved successfully"


class UserService:
    """Service layer for user profiles"""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def create_user(self, user_data: UserCreate) -> UserSaveResponse:
        """
        Save a user the first time their email is seen.

        The existence check and the insert are separate round trips, so two
        concurrent requests for the same email can both insert.
        """
        doc = user_data.model_dump(exclude_unset=True)

        if await self.repository.find_by_email(doc["email"]):
            logger.info(
                "User already exists",
                user_id=doc["email"],
                metadata={"event": "create_user_skipped"},
            )
            return UserSaveResponse(message=USER_EXISTS_MESSAGE)

        result = await self.repository.insert(doc)

        logger.info(
            f"Created user {result.insertedId}",
            user_id=doc["email"],
            metadata={"event": "create_user", "inserted_id": result.insertedId},
        )

        return UserSaveResponse(message=USER_SAVED_MESSAGE, result=result)

    async def list_users(self) -> List[Dict[str, Any]]:
        users = await self.repository.list_all()
        logger.info(f"Fetched {len(users)} users", metadata={"event": "list_users", "count": len(users)})
        return users

    async def get_user_role(self, email: str) -> Optional[Dict[str, Any]]:
        """
        Return the role document for a known user, None when unknown.

        A user stored without a role gets an empty document, not a null role.
        """
        user = await self.repository.find_by_email(email)
        if user is None:
            logger.info("Role lookup for unknown user", user_id=email, metadata={"event": "get_user_role_missing"})
            return None
        if "role" not in user:
            return {}
        return {"role": user["role"]}
