"""Seeding script for demo accounts, profiles and mentorship programs."""

import asyncio
import sys
import argparse
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from faker import Faker

from src.core.config import settings
from src.core.database import Database
from src.repositories.program import ProgramRepository
from src.repositories.user import UserRepository
from src.services.program import ProgramService
from src.schemas.program import ProgramCreate
from src.models.enums import UserRole, ProfileStatus


DEPARTMENTS = ["Computer Science", "Electronics", "Mechanical", "Civil", "Management"]

PROGRAMS = [
    ("Breaking into Data Science", 5),
    ("System Design Interview Prep", 3),
    ("Product Management 101", 4),
]


class UserSeeder:
    """Seeding class for creating demo accounts and programs."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)
        self.program_service = ProgramService(ProgramRepository(session), self.user_repo)
        self.fake = Faker()

    async def create_admin(self):
        """Create the default admin account."""
        existing = await self.user_repo.get_by_email("admin@admin.com")
        if existing:
            print("Admin account already exists")
            return existing

        admin = await self.user_repo.create("admin@admin.com", UserRole.ADMIN)
        print(f"Created admin account: {admin.email}")
        return admin

    async def create_members(self, role: UserRole, count: int):
        """Create accounts of a role, each with an approved profile."""
        print(f"Creating {count} {role.value} accounts...")

        users = []
        for _ in range(count):
            email = self.fake.unique.email()
            user = await self.user_repo.create(email, role)
            await self.user_repo.create_profile(
                user_id=user.id,
                name=self.fake.name(),
                email=email,
                department=self.fake.random_element(DEPARTMENTS),
                graduation_year=self.fake.random_int(min=2005, max=2024),
                company=self.fake.company() if role == UserRole.ALUMNI else None,
                designation=self.fake.job() if role == UserRole.ALUMNI else None,
                status=ProfileStatus.APPROVED
            )
            users.append(user)

        return users

    async def create_programs(self, mentors):
        """Create one sample program per mentor."""
        print("Creating mentorship programs...")

        for mentor, (subject, capacity) in zip(mentors, PROGRAMS):
            program = await self.program_service.create_program(ProgramCreate(
                mentor_id=mentor.id,
                subject=subject,
                description=f"<p>{self.fake.paragraph()}</p>",
                community_link=f"https://chat.whatsapp.com/{self.fake.lexify('????????????')}",
                capacity=capacity
            ))
            print(f"Created program '{program.subject}' (capacity {program.capacity})")

    async def clear_all_data(self):
        """Clear all seeded data."""
        print("Clearing all data...")

        try:
            # Clear in reverse order due to foreign key constraints
            await self.session.execute(text("DELETE FROM notifications"))
            await self.session.execute(text("DELETE FROM mentorship_enrollments"))
            await self.session.execute(text("DELETE FROM mentorship_programs"))
            await self.session.execute(text("DELETE FROM profiles"))
            await self.session.execute(text("DELETE FROM users"))

            await self.session.commit()
            print("All data cleared successfully!")

        except Exception as e:
            print(f"Error clearing data: {e}")
            await self.session.rollback()
            raise

    async def run_seeding(self):
        """Run the complete seeding process."""
        print("Starting seeding process...")
        print("=" * 50)

        await self.create_admin()
        mentors = await self.create_members(UserRole.ALUMNI, len(PROGRAMS))
        await self.create_members(UserRole.STUDENT, 10)
        await self.create_programs(mentors)

        print("=" * 50)
        print("Seeding completed successfully!")


async def main():
    """Main seeding function."""
    parser = argparse.ArgumentParser(description='Database seeding script')
    parser.add_argument('action', choices=['up', 'down'], help='up: create data, down: clear data')
    args = parser.parse_args()

    database = Database(settings.DATABASE_URI, echo=settings.SQL_ECHO)
    try:
        async with database.session() as session:
            seeder = UserSeeder(session)

            if args.action == 'down':
                await seeder.clear_all_data()
            else:
                await seeder.run_seeding()

    except Exception as e:
        print(f"Seeding failed: {e}")
        return 1
    finally:
        await database.dispose()

    return 0


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
