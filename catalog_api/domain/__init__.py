"""Domain layer.

Contains exceptions shared by the repository and API layers.
"""

from catalog_api.domain.exceptions import CatalogError, RepositoryError

__all__ = [
    "CatalogError",
    "RepositoryError",
]
