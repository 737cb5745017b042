import random
import logging
from datetime import datetime, timedelta, timezone
from sqlmodel import Session, SQLModel
from models import User, Post, new_comment
from dependencies import get_engine, create_access_token

logger = logging.getLogger(__name__)

# Data pools
FIRST_NAMES = [
    "Juan", "María", "Alberto", "Lucía", "Pedro", "Ana", "Carlos", "Sofia",
    "John", "Emma", "Michael", "Sarah", "David", "Isabella", "James", "Laura"
]

LAST_NAMES = [
    "Domínguez", "García", "Rodríguez", "López", "Martínez", "González",
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Miller", "Davis"
]

AVATARS = [
    "//www.gravatar.com/avatar/00000000000000000000000000000000?s=200&r=pg&d=mm",
]

POST_CONTENTS = [
    "Just finished my first project with Vue.js! 🚀",
    "Anyone else loving the new TypeScript features? #coding",
    "Beautiful day for a coffee and some coding ☕️",
    "Finally solved that bug that was driving me crazy! 🐛",
    "Learning FastAPI has been an amazing journey",
    "Just deployed my first full-stack application! 🎉",
    "Does anyone have good resources for learning Docker?",
]

COMMENT_CONTENTS = [
    "Congrats!",
    "Nice one, how long did it take?",
    "Same here, it was a pain",
    "Check out the official docs, they are great",
    "Totally agree",
]


def random_date(start_date, end_date):
    time_between = end_date - start_date
    days_between = max(time_between.days, 1)
    random_number_of_days = random.randrange(days_between)
    random_time = timedelta(
        hours=random.randint(0, 23),
        minutes=random.randint(0, 59),
        seconds=random.randint(0, 59)
    )
    return start_date + timedelta(days=random_number_of_days) + random_time


def create_test_data(num_users: int = 5, num_posts: int = 15):
    engine = get_engine()
    SQLModel.metadata.create_all(engine)

    with Session(engine) as session:
        users = []
        for _ in range(num_users):
            first_name = random.choice(FIRST_NAMES)
            last_name = random.choice(LAST_NAMES)
            handle = f"{first_name.lower()}{random.randint(1, 999)}"
            users.append(User(
                name=f"{first_name} {last_name}",
                email=f"{handle}@example.com",
                avatar=random.choice(AVATARS),
            ))

        session.add_all(users)
        session.commit()

        posts = []
        start_date = datetime(2023, 1, 1, tzinfo=timezone.utc)
        end_date = datetime.now(timezone.utc)
        for _ in range(num_posts):
            author = random.choice(users)
            post = Post(
                text=random.choice(POST_CONTENTS),
                name=author.name,
                avatar=author.avatar,
                user=author.id,
                date=random_date(start_date, end_date),
            )
            likers = random.sample(users, random.randint(0, len(users)))
            post.likes = [liker.id for liker in likers]
            commenters = random.sample(users, random.randint(0, min(3, len(users))))
            post.comments = [
                new_comment(random.choice(COMMENT_CONTENTS), c.name, c.avatar, c.id)
                for c in commenters
            ]
            posts.append(post)

        session.add_all(posts)
        session.commit()

        logger.info(f"Created {len(users)} users")
        logger.info(f"Created {len(posts)} posts")
        for user in users:
            token = create_access_token({"sub": user.id}, expires_delta=timedelta(days=1))
            logger.info(f"Token for {user.name} ({user.id}): {token}")


if __name__ == "__main__":
    from core.logging_config import setup_logging
    setup_logging()
    create_test_data()
