from .catalog import MediaCatalog
from .resolver import is_absolute, resolve
