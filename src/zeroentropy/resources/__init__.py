"""Per-domain wrappers around a client's ``post``."""

from .collections import Collections
from .documents import Documents
from .models import Models
from .queries import Queries

__all__ = ["Collections", "Documents", "Models", "Queries"]
