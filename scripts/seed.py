#!/usr/bin/env python3
"""Seed the database with sample users, features and votes.

Clears existing data first. Every vote goes through VoteService, so the
feature counters come out consistent with the vote rows.
"""

import asyncio
import random
import sys
from uuid import uuid4

import logfire
from dishka import AsyncContainer
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from featurevote.config import Settings
from featurevote.domain.model import User
from featurevote.domain.service import FeatureService, UserService, VoteService
from featurevote.domain.value import UserId
from featurevote.persistence.tables import features_table, users_table, votes_table
from featurevote.util.di.container import create_container
from featurevote.util.logging import setup_logging
from featurevote.util.observability import configure_logfire

SAMPLE_USERS = [
    ("alice@example.com", "Alice Johnson"),
    ("bob@example.com", "Bob Smith"),
    ("charlie@example.com", "Charlie Brown"),
    ("diana@example.com", "Diana Prince"),
    ("eve@example.com", "Eve Adams"),
]

SAMPLE_FEATURES = [
    (
        "Dark Mode Support",
        "Add a dark mode toggle to reduce eye strain during night-time studying sessions.",
    ),
    (
        "Export Study Data to PDF",
        "Allow users to export their study progress and notes as a PDF document for offline review.",
    ),
    (
        "Pomodoro Timer Integration",
        "Built-in pomodoro timer to help students manage their study sessions effectively.",
    ),
    (
        "Collaborative Study Groups",
        "Create and join study groups where users can share resources and track progress together.",
    ),
    (
        "Mobile App Offline Mode",
        "Allow the mobile app to work offline and sync when connection is restored.",
    ),
    (
        "AI-Powered Study Recommendations",
        "Use AI to suggest study topics and resources based on user performance and goals.",
    ),
    (
        "Spaced Repetition Flashcards",
        "Implement spaced repetition algorithm for flashcard reviews to improve retention.",
    ),
    (
        "Calendar Integration",
        "Sync study sessions with Google Calendar and other calendar apps.",
    ),
]

TOP_N = 5


async def seed(container: AsyncContainer) -> None:
    """Replace all data with the sample set."""
    # Users and features must be committed before the vote ledger can lock them
    async with container() as request_container:
        session = await request_container.get(AsyncSession)
        for table in (votes_table, features_table, users_table):
            await session.execute(delete(table))
        logfire.info("Existing data cleared")

        user_service = await request_container.get(UserService)
        feature_service = await request_container.get(FeatureService)

        users = [
            await user_service.save(User(id=UserId(uuid4()), email=email, name=name))
            for email, name in SAMPLE_USERS
        ]
        # Distribute features among users
        features = [
            await feature_service.create_feature(
                title=title,
                description=description,
                created_by_email=users[index % len(users)].email,
            )
            for index, (title, description) in enumerate(SAMPLE_FEATURES)
        ]
        logfire.info("Users and features created", users=len(users), features=len(features))

    async with container() as request_container:
        vote_service = await request_container.get(VoteService)
        feature_service = await request_container.get(FeatureService)

        # Each user votes for exactly one random feature
        for user in users:
            await vote_service.cast_or_move_vote(random.choice(features).id, user.id)
        logfire.info("Votes cast", votes=len(users))

        ranked = await feature_service.list_features_ranked()

    print(f"Users: {len(users)}")
    print(f"Features: {len(features)}")
    print(f"Votes: {len(users)}")
    print("Top features by votes:")
    for position, feature in enumerate(ranked[:TOP_N], start=1):
        print(f"  {position}. {feature.title} - {feature.vote_count} votes")


async def run() -> None:
    container = create_container()
    try:
        await seed(container)
    finally:
        await container.close()


def main() -> int:
    """Seed the database and log any errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Starting database seed")
        asyncio.run(run())
        logfire.info("Database seed completed successfully")
        return 0

    except Exception as e:
        logfire.error(
            "Database seed failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
