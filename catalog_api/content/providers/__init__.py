from catalog_api.content.providers.base import ContentProvider
from catalog_api.content.providers.in_memory import InMemoryContentProvider
from catalog_api.content.providers.json_file import JsonFileContentProvider

__all__ = ["ContentProvider", "InMemoryContentProvider", "JsonFileContentProvider"]
