"""Searching plugins by name and short description."""

from dataclasses import dataclass

from krewkit.fuzzy import find


@dataclass(frozen=True)
class SearchItem:
    """A plugin as seen by search: its canonical name and short description."""

    name: str
    description: str = ""


def search_by_name_and_desc(keyword, targets):
    """Return the names of the targets matching ``keyword``.

    An empty keyword returns every name. Otherwise name matches come first,
    followed by description matches with a positive score whose name was
    not already found.
    """
    names = [item.name for item in targets]
    if not keyword:
        return names

    results = []
    found = set()
    for match in find(keyword, names):
        results.append(match.text)
        found.add(match.index)

    for match in find(keyword, [item.description for item in targets]):
        if match.index not in found and match.score > 0:
            results.append(names[match.index])

    return results