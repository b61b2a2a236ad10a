import sys

from catalog_api.content.providers.json_file import CONTENT_PATH, load_document
from catalog_api.core.config import settings
from catalog_api.core.taxonomy import MULTI_DIMENSIONS, allowed_values
from catalog_api.filtering.codec import as_value_list
from catalog_api.filtering.types import ITEM_FIELDS


def find_problems(data: dict) -> list[str]:
    problems: list[str] = []
    categories = set(allowed_values("category"))
    for entry in data.get("items", []):
        entry_id = entry.get("id", "?")
        category = entry.get("category")
        if category is not None and category not in categories:
            problems.append(f"{entry_id}: unknown category {category!r}")
        for dimension in MULTI_DIMENSIONS:
            allowed = set(allowed_values(dimension))
            for value in as_value_list(entry.get(ITEM_FIELDS[dimension])):
                if value not in allowed:
                    problems.append(f"{entry_id}: unknown {dimension} value {value!r}")
        slugs = entry.get("slug") or {}
        for locale in settings.locale_list:
            if isinstance(slugs, dict) and not slugs.get(locale):
                problems.append(f"{entry_id}: missing {locale} slug")
    return problems


if __name__ == "__main__":
    path = sys.argv[1] if len(sys.argv) > 1 else str(settings.CATALOG_CONTENT_PATH or CONTENT_PATH)
    problems = find_problems(load_document(path))
    for line in problems:
        print(line)
    print(f"{len(problems)} problem(s) in {path}")
    sys.exit(1 if problems else 0)
