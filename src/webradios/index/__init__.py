from .builder import CatalogIndexBuilder
from .pager import paginate

__all__ = ["CatalogIndexBuilder", "paginate"]
