"""Seed or clear demo alumni, students and mentorship programs."""

import asyncio
import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from scripts.seed_users import main

USAGE = """Usage: python seed.py [up|down]
  up   - Create admin, alumni mentors, students and sample programs
  down - Delete notifications, enrollments, programs, profiles and accounts"""

if __name__ == "__main__":
    if len(sys.argv) != 2 or sys.argv[1] not in ("up", "down"):
        print(USAGE)
        sys.exit(1)

    action = sys.argv[1]
    sys.argv = ["seed_users.py", action]

    print("Clearing mentorship data..." if action == "down" else "Seeding mentorship data...")
    sys.exit(asyncio.run(main()))
