"""Link admissibility for reverse traversal."""
from typing import Callable, Iterable

from transitive_frontier.models import PackageLink


def skip_predicate(skip: Iterable[str]) -> Callable[[PackageLink], bool]:
    """
    Build a predicate rejecting links into packages whose id contains any
    of the ``skip`` substrings.
    """
    patterns = tuple(skip or ())

    def admissible(link: PackageLink) -> bool:
        return not any(pattern in link.to.id for pattern in patterns)

    return admissible
