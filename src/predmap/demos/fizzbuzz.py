"""FizzBuzz driven by ``all_matches``.

There is no "fizz buzz" rule: a number divisible by both 3 and 5 matches
both entries, and the labels are joined with a space.
"""

from predmap.maps.predicate_map import PredicateMap


def sequence_rules() -> PredicateMap[int, str]:
    """The modulus tests and their labels."""
    return PredicateMap.from_pairs(
        {
            lambda i: i % 3 == 0: "fizz",
            lambda i: i % 5 == 0: "buzz",
        },
        default="",
    )


class FizzBuzzRunner:
    """Builds the rule map once and reuses it for every number."""

    __slots__ = ("_rules",)

    def __init__(self, rules: PredicateMap[int, str] | None = None) -> None:
        self._rules = rules if rules is not None else sequence_rules()

    def line(self, number: int) -> str:
        labels = self._rules.all_matches(number)
        if labels:
            return " ".join(labels)
        return str(number)

    def run(self, limit: int) -> list[str]:
        """Lines for every number from 0 through *limit* inclusive."""
        return [self.line(number) for number in range(limit + 1)]
