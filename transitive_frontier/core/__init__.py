"""
Core frontier analysis.

Target selection, link pruning and the frontier resolver itself. Nothing in
here performs I/O.
"""
from transitive_frontier.core.predicate import skip_predicate
from transitive_frontier.core.resolver import FrontierResolver, resolve_frontier
from transitive_frontier.core.target import find_candidates, resolve_target

__all__ = [
    "FrontierResolver",
    "find_candidates",
    "resolve_frontier",
    "resolve_target",
    "skip_predicate",
]
