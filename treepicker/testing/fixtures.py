"""Test fixtures for TreePicker consumers.

Sample node types and trees for exercising pickers in test suites and
demos, without every project re-declaring the same location hierarchy.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Location:
    """A hashable, identifiable tree node.

    Identity is the title. Children are a tuple so the node stays
    hashable and can be stored directly in a selection set; a Location
    with children=None is a leaf, one with children=() is an empty
    internal node.

    Example:
        uk = Location("United Kingdom", (Location("London"),))
        uk.id            # "United Kingdom"
        uk.children[0]   # Location(title='London', children=None)
    """

    title: str
    children: Optional[Tuple['Location', ...]] = None

    @property
    def id(self) -> str:
        return self.title

    def __str__(self) -> str:
        return self.title


def location(title: str, *children: Location, leaf: Optional[bool] = None) -> Location:
    """Build a Location; with no children it is a leaf unless leaf=False."""
    if not children and leaf is not False:
        return Location(title)
    return Location(title, tuple(children))


def locations_tree() -> Tuple[Location, ...]:
    """Return the sample country/city forest.

    Structure:
    United Kingdom
    ├── London
    ├── Birmingham
    └── Bristol
    France
    ├── Paris
    ├── Toulouse
    └── Bordeaux
    Germany
    ├── Berlin
    ├── Frankfurt
    └── Hamburg
    Russia            (leaf)
    Antarctica        (internal, no children)
    """
    return (
        location("United Kingdom",
                 location("London"),
                 location("Birmingham"),
                 location("Bristol")),
        location("France",
                 location("Paris"),
                 location("Toulouse"),
                 location("Bordeaux")),
        location("Germany",
                 location("Berlin"),
                 location("Frankfurt"),
                 location("Hamburg")),
        location("Russia"),
        location("Antarctica", leaf=False),
    )
