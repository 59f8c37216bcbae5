#!/usr/bin/env python3
"""Seed the database with demo data.

Clears tasks, projects, sessions and users (in that order), then inserts one
demo user, three projects and ten tasks.
"""

import argparse
import asyncio
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from dotenv import load_dotenv

from projecthub.adapters import create_repository
from projecthub.config import get_settings
from projecthub.core.logger import StructuredLogger
from projecthub.domain.entities import Project, Task, User
from projecthub.domain.enums import ProjectStatus, TaskPriority, TaskStatus
from projecthub.ports.repository import ProjectRepository

DEMO_EMAIL = "demo@example.com"
DEMO_NAME = "Demo User"
# No hashing exists yet; the auth layer will replace this value
PLACEHOLDER_PASSWORD_HASH = "PLACEHOLDER_HASH_WILL_BE_REPLACED_IN_SLICE_3"


@dataclass
class SeedSummary:
    """Record counts after seeding."""
    users: int
    projects: int
    tasks: int

    def to_dict(self) -> dict:
        return {"users": self.users, "projects": self.projects, "tasks": self.tasks}


async def clear_database(repository: ProjectRepository) -> None:
    """Delete dependents before the rows they reference."""
    await repository.delete_all_tasks()
    await repository.delete_all_projects()
    await repository.delete_all_sessions()
    await repository.delete_all_users()


def _demo_tasks(website: Project, mobile: Project, marketing: Project) -> List[Task]:
    return [
        # Website Redesign
        Task(
            project_id=website.id,
            title="Design homepage mockup",
            description="Create high-fidelity mockup in Figma",
            status=TaskStatus.DONE,
            priority=TaskPriority.HIGH,
        ),
        Task(
            project_id=website.id,
            title="Implement responsive navigation",
            description="Build mobile-first navigation component",
            status=TaskStatus.IN_PROGRESS,
            priority=TaskPriority.HIGH,
        ),
        Task(
            project_id=website.id,
            title="Set up CI/CD pipeline",
            description="Configure GitHub Actions for automated deployments",
            status=TaskStatus.TODO,
            priority=TaskPriority.MEDIUM,
        ),
        Task(
            project_id=website.id,
            title="Write technical documentation",
            description="Document API endpoints and component usage",
            status=TaskStatus.TODO,
            priority=TaskPriority.LOW,
            due_date=datetime(2026, 3, 15, tzinfo=timezone.utc),
        ),
        # Mobile App Development
        Task(
            project_id=mobile.id,
            title="Research native frameworks",
            description="Evaluate React Native vs Flutter vs native development",
            status=TaskStatus.IN_PROGRESS,
            priority=TaskPriority.HIGH,
        ),
        Task(
            project_id=mobile.id,
            title="Design app wireframes",
            description="Create low-fidelity wireframes for all screens",
            status=TaskStatus.TODO,
            priority=TaskPriority.HIGH,
        ),
        Task(
            project_id=mobile.id,
            title="Set up development environment",
            description="Install Xcode, Android Studio, and dependencies",
            status=TaskStatus.TODO,
            priority=TaskPriority.MEDIUM,
        ),
        # Marketing Campaign Q1
        Task(
            project_id=marketing.id,
            title="Launch social media campaign",
            description="Execute planned posts across all platforms",
            status=TaskStatus.DONE,
            priority=TaskPriority.HIGH,
        ),
        Task(
            project_id=marketing.id,
            title="Analyze campaign metrics",
            description="Review engagement and conversion data",
            status=TaskStatus.DONE,
            priority=TaskPriority.MEDIUM,
        ),
        Task(
            project_id=marketing.id,
            title="Prepare Q2 strategy",
            description="Build on Q1 learnings for next quarter",
            status=TaskStatus.DONE,
            priority=TaskPriority.MEDIUM,
        ),
    ]


async def seed_database(repository: ProjectRepository, logger: StructuredLogger) -> SeedSummary:
    """Reset the store and insert the demo data set."""
    logger.info("Seeding database...")

    await clear_database(repository)
    logger.info("Cleared existing data")

    demo_user = await repository.create_user(User(
        email=DEMO_EMAIL,
        password_hash=PLACEHOLDER_PASSWORD_HASH,
        name=DEMO_NAME,
    ))
    logger.info("Created demo user", {"email": demo_user.email})

    website = await repository.create_project(Project(
        user_id=demo_user.id,
        name="Website Redesign",
        description="Complete overhaul of company website with modern design",
        status=ProjectStatus.ACTIVE,
    ))
    mobile = await repository.create_project(Project(
        user_id=demo_user.id,
        name="Mobile App Development",
        description="Build native iOS and Android applications",
        status=ProjectStatus.PLANNING,
    ))
    marketing = await repository.create_project(Project(
        user_id=demo_user.id,
        name="Marketing Campaign Q1",
        description="First quarter marketing initiatives and social media strategy",
        status=ProjectStatus.COMPLETED,
    ))
    logger.info("Created 3 sample projects")

    await repository.create_tasks(_demo_tasks(website, mobile, marketing))
    logger.info("Created 10 sample tasks across all projects")

    summary = SeedSummary(
        users=await repository.count_users(),
        projects=await repository.count_projects(),
        tasks=await repository.count_tasks(),
    )
    logger.info("Database seeded successfully", summary.to_dict())
    return summary


async def run(database_url: Optional[str] = None) -> SeedSummary:
    """Open the repository, seed it and always close it again."""
    settings = get_settings()
    logger = StructuredLogger.from_settings(settings, name="projecthub.seed")
    repository = await create_repository(database_url or settings.database_url)
    try:
        return await seed_database(repository, logger)
    finally:
        await repository.close()


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Seed the ProjectHub database with demo data")
    parser.add_argument(
        "--database-url",
        default=None,
        help="Override DATABASE_URL (e.g. memory:// for a dry run)",
    )
    args = parser.parse_args(argv)

    try:
        asyncio.run(run(args.database_url))
    except Exception as exc:
        StructuredLogger(name="projecthub.seed", development=False).error("Seed failed", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
