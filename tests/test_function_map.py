"""Tests for PredicateFunctionMap — values computed from the probe on match."""

import pytest

from predmap.errors import IndexOutOfRange, InvalidArgument
from predmap.maps.function_map import PredicateFunctionMap
from predmap.maps.protocol import PredicateMapping


@pytest.fixture
def describe() -> PredicateFunctionMap[int, str]:
    return PredicateFunctionMap.from_pairs(
        [
            (lambda n: n < 0, lambda n: f"{n} is negative"),
            (lambda n: n % 2 == 0, lambda n: f"{n} is even"),
            (lambda n: n > 100, lambda n: f"{n} is large"),
        ],
        default="unremarkable",
    )


class TestAdd:
    def test_add_function(self) -> None:
        rules: PredicateFunctionMap[str, int] = PredicateFunctionMap(0)
        rules.add(lambda s: s.isdigit(), int)
        assert rules.first_match("42") == 42

    def test_none_function_rejected(self) -> None:
        rules: PredicateFunctionMap[str, int] = PredicateFunctionMap(0)
        with pytest.raises(InvalidArgument) as exc_info:
            rules.add(lambda s: True, None)  # type: ignore[arg-type]
        assert exc_info.value.parameter == "value"

    def test_plain_value_rejected(self) -> None:
        rules: PredicateFunctionMap[str, str] = PredicateFunctionMap("")
        with pytest.raises(InvalidArgument, match="callable"):
            rules.add(lambda s: True, "not a function")  # type: ignore[arg-type]

    def test_none_predicate_rejected(self) -> None:
        rules: PredicateFunctionMap[str, str] = PredicateFunctionMap("")
        with pytest.raises(InvalidArgument) as exc_info:
            rules.add(None, str)  # type: ignore[arg-type]
        assert exc_info.value.parameter == "predicate"


class TestQueries:
    def test_first_match_calls_function_with_probe(self, describe: PredicateFunctionMap[int, str]) -> None:
        assert describe.first_match(-3) == "-3 is negative"
        assert describe.first_match(4) == "4 is even"

    def test_default_returned_uncalled(self, describe: PredicateFunctionMap[int, str]) -> None:
        assert describe.first_match(7) == "unremarkable"

    def test_callable_default_not_invoked(self) -> None:
        rules: PredicateFunctionMap[int, object] = PredicateFunctionMap(str)
        assert rules.first_match(1) is str

    def test_all_matches(self, describe: PredicateFunctionMap[int, str]) -> None:
        assert sorted(describe.all_matches(102)) == ["102 is even", "102 is large"]

    def test_all_matches_empty(self, describe: PredicateFunctionMap[int, str]) -> None:
        assert describe.all_matches(7) == []

    def test_only_matching_functions_run(self) -> None:
        calls: list[str] = []

        def value_for(name: str):
            def build(n: int) -> str:
                calls.append(name)
                return name

            return build

        rules = PredicateFunctionMap.from_lists(
            [lambda n: n > 0, lambda n: n < 0, lambda n: n > 10],
            [value_for("positive"), value_for("negative"), value_for("big")],
            default="zero",
        )
        assert rules.all_matches(5) == ["positive"]
        assert calls == ["positive"]

    def test_count_and_any(self, describe: PredicateFunctionMap[int, str]) -> None:
        assert describe.count_matches(-4) == 2
        assert describe.any_matches(7) is False
        assert describe.any_matches(-1) is True

    def test_match_indexes(self, describe: PredicateFunctionMap[int, str]) -> None:
        assert describe.match_indexes(200) == [1, 2]


class TestMutation:
    def test_update_at(self, describe: PredicateFunctionMap[int, str]) -> None:
        describe.update_at(0, lambda n: "below zero")
        assert describe.first_match(-1) == "below zero"

    def test_update_at_rejects_plain_value(self, describe: PredicateFunctionMap[int, str]) -> None:
        with pytest.raises(InvalidArgument):
            describe.update_at(0, "below zero")  # type: ignore[arg-type]

    def test_update_matching(self, describe: PredicateFunctionMap[int, str]) -> None:
        assert describe.update_matching(-2, lambda n: "odd one out") == 2
        assert describe.first_match(-5) == "odd one out"
        assert describe.first_match(300) == "odd one out"
        assert describe.first_match(301) == "301 is large"

    def test_remove_at(self, describe: PredicateFunctionMap[int, str]) -> None:
        describe.remove_at(0)
        assert describe.first_match(-4) == "-4 is even"
        with pytest.raises(IndexOutOfRange):
            describe.remove_at(2)

    def test_functions_view(self, describe: PredicateFunctionMap[int, str]) -> None:
        functions = describe.functions()
        assert len(functions) == 3
        assert functions[2](500) == "500 is large"


class TestProtocol:
    def test_function_map_is_predicate_mapping(self, describe: PredicateFunctionMap[int, str]) -> None:
        assert isinstance(describe, PredicateMapping)

    def test_eager_map_is_predicate_mapping(self) -> None:
        from predmap.maps.predicate_map import PredicateMap

        assert isinstance(PredicateMap(""), PredicateMapping)

    def test_plain_list_is_not(self) -> None:
        assert not isinstance([], PredicateMapping)
