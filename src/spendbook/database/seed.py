"""Schema bootstrap and default category seeding."""

import logging
import uuid
from datetime import datetime

from spendbook.database.base import Database

logger = logging.getLogger(__name__)

# (name, icon, color_token, sort_order)
DEFAULT_CATEGORIES = [
    ("Food", "restaurant", "food", 1),
    ("Transport", "car", "transport", 2),
    ("Shopping", "cart", "shopping", 3),
    ("Bills", "receipt", "bills", 4),
    ("Health", "medkit", "health", 5),
    ("Entertainment", "game-controller", "entertainment", 6),
    ("Education", "book", "education", 7),
    ("Other", "ellipsis-horizontal", "other", 8),
]


def seed_default_categories(db: Database) -> int:
    """Insert the default categories into an empty categories table.

    Does nothing once any category row exists, deleted ones included.

    Returns:
        Number of categories inserted
    """
    with db.transaction():
        if db.count_categories() > 0:
            return 0

        now = datetime.now()
        for name, icon, color_token, sort_order in DEFAULT_CATEGORIES:
            db.create_category(
                category_id=str(uuid.uuid4()),
                name=name,
                created_at=now,
                icon=icon,
                color_token=color_token,
                sort_order=sort_order,
            )

    logger.info(f"Seeded {len(DEFAULT_CATEGORIES)} default categories")
    return len(DEFAULT_CATEGORIES)


def bootstrap(db: Database) -> int:
    """Prepare a database for first use: create the schema, then seed categories.

    Returns:
        Number of default categories inserted
    """
    db.connect()
    db.initialize_schema()
    return seed_default_categories(db)
