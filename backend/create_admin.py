"""
JobBoard Admin Seeder

Creates the first Admin account unless one already exists. Credentials come
from ADMIN_USERNAME / ADMIN_PASSWORD (see jobboard.core.config).
"""

import argparse

from jobboard.core.config import settings
from jobboard.core.logging import get_logger
from jobboard.db.base import Base
from jobboard.db.session import SessionLocal, engine
from jobboard.services.credentials import CredentialStore

# Register models on Base.metadata
import jobboard.models  # noqa: F401

logger = get_logger("create_admin")


def create_admin(username: str, password: str) -> bool:
    """Create the admin account. Returns False if an admin already exists."""
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        admin, created = CredentialStore(db).ensure_admin(username, password)
        if created:
            logger.info(f"Admin user '{admin.username}' created successfully")
        else:
            logger.info(f"Admin user already exists ('{admin.username}'). Skipping...")
        return created
    except Exception as e:
        db.rollback()
        logger.error(f"Error creating admin user: {e}")
        raise
    finally:
        db.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the initial admin account.")
    parser.add_argument("--username", default=settings.ADMIN_USERNAME)
    parser.add_argument("--password", default=settings.ADMIN_PASSWORD)
    args = parser.parse_args()
    create_admin(args.username, args.password)


if __name__ == "__main__":
    main()
