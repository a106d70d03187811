"""User repository: account and profile lookups."""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.user import User, Profile
from src.models.enums import UserRole, UserStatus, ProfileStatus


class UserRepository:
    """Repository for accounts and their alumni/student profiles."""

    def __init__(self, session: AsyncSession):
        self.session = session

    # ===== ACCOUNT OPERATIONS =====

    async def create(
        self,
        email: str,
        role: UserRole,
        status: UserStatus = UserStatus.ACTIVE
    ) -> User:
        """Create an account."""
        user = User(email=email.lower(), role=role, status=status)
        self.session.add(user)
        await self.session.commit()
        await self.session.refresh(user)
        return user

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get account by ID."""
        query = select(User).where(User.id == user_id)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get account by email."""
        query = select(User).where(User.email == email.lower())
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    # ===== PROFILE OPERATIONS =====

    async def create_profile(
        self,
        user_id: int,
        name: str,
        email: str,
        department: Optional[str] = None,
        graduation_year: Optional[int] = None,
        company: Optional[str] = None,
        designation: Optional[str] = None,
        status: ProfileStatus = ProfileStatus.PENDING
    ) -> Profile:
        """Create the profile owned by an account."""
        profile = Profile(
            user_id=user_id,
            name=name,
            email=email.lower(),
            department=department,
            graduation_year=graduation_year,
            company=company,
            designation=designation,
            status=status
        )
        self.session.add(profile)
        await self.session.commit()
        await self.session.refresh(profile)
        return profile

    async def get_profile_by_user_id(self, user_id: int) -> Optional[Profile]:
        """Get the profile owned by an account."""
        query = select(Profile).where(Profile.user_id == user_id)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    # ===== IDENTITY RESOLUTION =====

    async def resolve_account_id(self, identifier: int) -> Optional[int]:
        """Resolve an account id, falling back once to a profile id.

        Callers may hand in either an account id or the id of the profile
        row. The account lookup wins; only when no account has that id is
        the identifier treated as a profile id and translated to the
        profile's owning account.
        """
        user = await self.get_by_id(identifier)
        if user:
            return user.id

        query = (
            select(User.id)
            .join(Profile, Profile.user_id == User.id)
            .where(Profile.id == identifier)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()
