"""Category repository."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import TYPE_CHECKING, Any, Callable, Optional

from spendbook.domain.entities import Category
from spendbook.domain.errors import (
    CATEGORY_NAME_NOT_UNIQUE,
    ConflictError,
    NotFoundError,
    ValidationError,
    category_not_found,
    duplicate_reorder_ids,
)
from spendbook.domain.validators import (
    is_category_name_unique,
    validate_category_input,
)

if TYPE_CHECKING:
    # Runtime import would cycle through spendbook.database.base -> domain.entities
    from spendbook.database.base import Database

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({"name", "icon", "color_token", "sort_order", "is_archived"})


class CategoryRepository:
    """Create, rename, archive and order expense categories.

    Category names are unique ignoring case among non-deleted categories,
    archived ones included. Archiving hides a category from pickers; it
    never touches ``deleted_at``.
    """

    def __init__(self, db: Database, clock: Callable[[], datetime] = datetime.now):
        """Initialize category repository.

        Args:
            db: Database instance
            clock: Source of "now" for created/updated/deleted stamps
        """
        self.db = db
        self.clock = clock

    def _validated_name(self, name: Any, exclude_id: Optional[str] = None) -> str:
        errors = validate_category_input(name)
        if errors:
            raise ValidationError(errors["name"], errors)

        existing = [
            cat.name for cat in self.db.list_categories(include_archived=True)
            if cat.id != exclude_id
        ]
        if not is_category_name_unique(name, existing):
            raise ConflictError(CATEGORY_NAME_NOT_UNIQUE)
        return name.strip()

    def create(
        self,
        name: str,
        icon: Optional[str] = None,
        color_token: Optional[str] = None,
        sort_order: Optional[int] = None,
        is_archived: bool = False,
    ) -> Category:
        """Create a category.

        Args:
            name: Display name, stored trimmed with its original casing
            icon: Optional symbolic icon reference
            color_token: Optional symbolic colour reference
            sort_order: Position among categories; appended at the end when None
            is_archived: Create the category already hidden from pickers

        Returns:
            The created Category

        Raises:
            ValidationError: If the name is empty
            ConflictError: If a non-deleted category already uses the name
        """
        with self.db.transaction():
            clean_name = self._validated_name(name)

            if sort_order is None:
                max_order = self.db.get_max_category_sort_order()
                sort_order = 0 if max_order is None else max_order + 1

            category = self.db.create_category(
                category_id=str(uuid.uuid4()),
                name=clean_name,
                created_at=self.clock(),
                icon=icon,
                color_token=color_token,
                sort_order=sort_order,
                is_archived=is_archived,
            )

        logger.info(f"Created category '{category.name}' ({category.id})")
        return category

    def update(self, category_id: str, **changes: Any) -> None:
        """Partially update a category.

        Only the supplied fields change. A new ``name`` is validated and must
        stay unique, ignoring the category's own current name.

        Raises:
            TypeError: If a field is not updatable
            ValidationError: If the new name is empty
            ConflictError: If the new name collides with another category
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise TypeError(f"Cannot update category field(s): {', '.join(sorted(unknown))}")

        fields = dict(changes)
        with self.db.transaction():
            if "name" in fields:
                fields["name"] = self._validated_name(fields["name"], exclude_id=category_id)
            fields["updated_at"] = self.clock()
            self._write(category_id, fields)

    def archive(self, category_id: str) -> None:
        """Hide a category from pickers. Existing expenses keep referencing it."""
        with self.db.transaction():
            self._write(category_id, {"is_archived": True, "updated_at": self.clock()})

    def restore(self, category_id: str) -> None:
        """Undo archive."""
        with self.db.transaction():
            self._write(category_id, {"is_archived": False, "updated_at": self.clock()})

    def soft_delete(self, category_id: str) -> None:
        """Soft-delete a category. It leaves every listing and frees its name."""
        now = self.clock()
        with self.db.transaction():
            self._write(category_id, {"deleted_at": now, "updated_at": now})

    def reorder(self, ids: list[str]) -> None:
        """Set each category's sort_order to its index in ``ids``, atomically.

        Raises:
            ValidationError: If an id repeats
            NotFoundError: If an id matches no non-deleted category; no
                sort order is changed in that case
        """
        ids = list(ids)
        duplicates = sorted({cid for cid in ids if ids.count(cid) > 1})
        if duplicates:
            raise ValidationError(duplicate_reorder_ids(duplicates))

        now = self.clock()
        with self.db.transaction():
            for index, category_id in enumerate(ids):
                if self.db.get_category(category_id) is None:
                    raise NotFoundError(category_not_found(category_id))
                self.db.update_category(category_id, {"sort_order": index, "updated_at": now})

        logger.info(f"Reordered {len(ids)} categories")

    def get_by_id(self, category_id: str) -> Optional[Category]:
        """Get a non-deleted category, or None."""
        return self.db.get_category(category_id)

    def list_active(self) -> list[Category]:
        """Non-archived, non-deleted categories ordered by sort_order, then name."""
        return self.db.list_categories(include_archived=False)

    def list_all(self) -> list[Category]:
        """All non-deleted categories, archived included, in display order."""
        return self.db.list_categories(include_archived=True)

    def _write(self, category_id: str, fields: dict[str, Any]) -> None:
        if self.db.update_category(category_id, fields):
            logger.info(f"Updated category {category_id}: {', '.join(sorted(fields))}")
        else:
            logger.warning(f"Category {category_id} not found, nothing updated")
