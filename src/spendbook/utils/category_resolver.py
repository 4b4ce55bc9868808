"""Utility for resolving category names to IDs."""

from spendbook.domain.category import CategoryRepository
from spendbook.domain.errors import NotFoundError, category_not_found
from spendbook.domain.validators import normalize_category_name


def resolve_category(category_repo: CategoryRepository, category: str) -> str:
    """Resolve a category id or name to a category id.

    Ids are matched first; names are matched ignoring case, archived
    categories included.

    Raises:
        NotFoundError: If no non-deleted category matches
    """
    if category_repo.get_by_id(category) is not None:
        return category

    wanted = normalize_category_name(category)
    for cat in category_repo.list_all():
        if normalize_category_name(cat.name) == wanted:
            return cat.id

    raise NotFoundError(category_not_found(category))
