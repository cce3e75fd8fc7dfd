"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Exclusion rules that combine several rule objects.

    A directory is excluded if ANY of the constituent rules excludes it. The
    command line uses this to apply bare-name glob rules and path-scoped
    gitignore rules together.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from repo2dirs.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> from repo2dirs.exclusion_rules.glob_rules import GlobExclusionRules
        >>> git_rules = GitIgnoreExclusionRules()
        >>> git_rules.add_rule("/docs/")
        >>> composite = CompositeExclusionRules([GlobExclusionRules(["node_modules"]), git_rules])
        >>> composite.exclude("web/node_modules/")
        True
        >>> composite.exclude("docs/")
        True
        >>> composite.exclude("web/docs/")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Exclusion rules to combine, evaluated in the order given.

        Raises:
            ValueError: If rules is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, " f"got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        return any(rule.exclude(path) for rule in self.rules)

    def has_rules(self) -> bool:
        return any(rule.has_rules() for rule in self.rules)
