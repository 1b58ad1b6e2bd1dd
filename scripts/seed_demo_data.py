"""Utility script to fill the database with demo users and prayer activity.

Everything goes through the application use cases, so the seeded requests,
responses and updates produce the same notifications real traffic would.
"""

from __future__ import annotations

import argparse
import random

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.use_cases.prayer_requests import (
    close_prayer_request,
    create_prayer_request,
    post_prayer_update,
    respond_to_prayer_request,
)
from app.application.use_cases.users import register_user, update_settings
from app.domain.entities import User
from app.domain.exceptions import PrayerBoardError
from app.infrastructure.database import SessionLocal, initialize_database
from app.infrastructure.repositories import UserRepository

DEMO_PASSWORD = "Password123!"
DEMO_USERS = (
    ("mary@faithwhisperer.app", True),
    ("john@faithwhisperer.app", True),
    ("esther@faithwhisperer.app", False),
)

RANDOM_PRAYER_TEMPLATES = (
    ("Guidance in a decision", "Please pray for clarity and wisdom as I choose between two job opportunities."),
    ("Family unity", "Please pray for reconciliation and peace in our family conversations."),
    ("Health and strength", "Please pray for healing and renewed strength during this recovery season."),
    ("Financial provision", "Please pray for God's provision as we manage urgent household expenses."),
    ("Peace over anxiety", "Please pray for calm, steady faith, and restful sleep this week."),
    ("Workplace favor", "Please pray for grace, favor, and good relationships at work."),
    ("Safe travel", "Please pray for safe flights and health during upcoming travel."),
    ("Spiritual growth", "Please pray that I stay disciplined in prayer and Scripture daily."),
)

RANDOM_RESPONSE_MESSAGES = (
    "Praying for wisdom and peace in this season.",
    "Standing with you in prayer today.",
    "Praying for strength and open doors.",
    "Lifting this up and believing for breakthrough.",
    "Praying God gives you peace and direction.",
)

RANDOM_UPDATE_MESSAGES = (
    "Thank you for praying. I have started seeing progress.",
    "I appreciate everyone's support and prayers.",
    "Small breakthrough today. Grateful for your prayers.",
    "Please continue praying, I am feeling encouraged.",
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Seed the Faith Whisperer database with demo data.",
    )
    parser.add_argument(
        "--random-count",
        type=int,
        default=5,
        help="Number of random prayer requests to add (default: 5)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random generator, for reproducible data",
    )
    return parser.parse_args()


def ensure_demo_user(session: Session, email: str, volunteered_to_pray: bool) -> User:
    """Return the demo user, registering it on first run."""

    user = UserRepository(session).get_by_email(email)
    if user is None:
        user = register_user(session, email=email, password=DEMO_PASSWORD)
    return update_settings(session, user_id=user.id, volunteered_to_pray=volunteered_to_pray)


def seed_fixed_requests(session: Session, users: dict[str, User]) -> None:
    mary = users["mary@faithwhisperer.app"]
    john = users["john@faithwhisperer.app"]
    esther = users["esther@faithwhisperer.app"]

    healing = create_prayer_request(
        session,
        requester_id=mary.id,
        title="Healing & peace",
        body="Please pray for my mom's recovery and peace for our family this week.",
    )
    interview = create_prayer_request(
        session,
        requester_id=john.id,
        title="Job interview",
        body="Please pray for wisdom and confidence for my interview tomorrow.",
    )
    travel = create_prayer_request(
        session,
        requester_id=esther.id,
        title="Travel safety",
        body="Please pray for safe travel and health during my trip.",
    )

    respond_to_prayer_request(
        session,
        actor_id=john.id,
        prayer_request_id=healing.id,
        message="Praying for strength and comfort for your family.",
    )
    respond_to_prayer_request(session, actor_id=esther.id, prayer_request_id=healing.id)
    respond_to_prayer_request(
        session,
        actor_id=mary.id,
        prayer_request_id=interview.id,
        message="Praying that you speak clearly and walk in favor.",
    )
    respond_to_prayer_request(
        session,
        actor_id=john.id,
        prayer_request_id=travel.id,
        message="Thankful this went well. Praying continued peace.",
    )
    respond_to_prayer_request(session, actor_id=mary.id, prayer_request_id=travel.id)

    post_prayer_update(
        session,
        actor_id=mary.id,
        prayer_request_id=healing.id,
        body="Thank you all. She has started treatment and we are hopeful.",
    )
    post_prayer_update(
        session,
        actor_id=john.id,
        prayer_request_id=interview.id,
        body="Interview completed today. Thank you for your prayers.",
    )
    post_prayer_update(
        session,
        actor_id=esther.id,
        prayer_request_id=travel.id,
        body="Trip completed safely. Grateful for everyone praying.",
    )
    close_prayer_request(session, requester_id=esther.id, prayer_request_id=travel.id)


def seed_random_requests(session: Session, users: list[User], count: int, rng: random.Random) -> None:
    for _ in range(count):
        title, body = rng.choice(RANDOM_PRAYER_TEMPLATES)
        requester = rng.choice(users)
        prayer_request = create_prayer_request(
            session, requester_id=requester.id, title=title, body=body
        )

        others = [user for user in users if user.id != requester.id]
        for responder in rng.sample(others, rng.randint(1, len(others))):
            message = rng.choice(RANDOM_RESPONSE_MESSAGES) if rng.random() < 0.7 else None
            respond_to_prayer_request(
                session,
                actor_id=responder.id,
                prayer_request_id=prayer_request.id,
                message=message,
            )

        if rng.random() < 0.8:
            if rng.random() < 0.6:
                post_prayer_update(
                    session,
                    actor_id=requester.id,
                    prayer_request_id=prayer_request.id,
                    body=rng.choice(RANDOM_UPDATE_MESSAGES),
                )
        else:
            close_prayer_request(
                session, requester_id=requester.id, prayer_request_id=prayer_request.id
            )


def main() -> None:
    """Seed demo data using the provided command line arguments."""

    args = parse_args()
    rng = random.Random(args.seed)

    initialize_database()

    session = SessionLocal()
    try:
        users = {
            email: ensure_demo_user(session, email, volunteered)
            for email, volunteered in DEMO_USERS
        }
        seed_fixed_requests(session, users)
        seed_random_requests(session, list(users.values()), args.random_count, rng)
    except PrayerBoardError as exc:
        raise SystemExit(f"Could not seed demo data: {exc.message}") from exc
    except SQLAlchemyError as exc:
        raise SystemExit(f"Database error while seeding demo data: {exc}") from exc
    finally:
        session.close()

    print("Seed data inserted successfully.")
    print(f"Random prayer requests added: {args.random_count}")
    print(f"Demo users (password for all): {DEMO_PASSWORD}")
    for email, volunteered in DEMO_USERS:
        print(f"- {email} (volunteered_to_pray={volunteered})")


if __name__ == "__main__":
    main()
