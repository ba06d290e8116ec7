"""
Utility modules for the talent matcher application.
"""

from .config import Config
from .tables import export_tables, load_knowledge_base, load_tables

__all__ = [
    "Config",
    "export_tables",
    "load_knowledge_base",
    "load_tables",
]
