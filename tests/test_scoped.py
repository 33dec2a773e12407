"""Tests for point-free combinators and pipe()."""

from fallible import EMPTY, Err, Maybe, Nothing, Ok, Result, Some, maybe
from fallible.scoped import (
    chain,
    check,
    flatmap,
    is_err,
    is_nothing,
    is_ok,
    is_some,
    map_,
    on_err,
    on_ok,
    or_,
    or_else,
    pipe,
    refine,
    unfold,
)


def parse_int(text: str) -> Result[int, str]:
    try:
        return Ok(int(text))
    except ValueError:
        return Err(f"not a number: {text!r}")


class TestGuards:
    """Tests for the variant guard functions."""

    def test_is_ok_is_err(self):
        assert is_ok(Ok(1))
        assert not is_ok(Err(1))
        assert is_err(Err(1))
        assert not is_err(Some(1))

    def test_is_some(self):
        assert is_some(Some())
        assert not is_some(Nothing)

    def test_is_nothing(self):
        assert is_nothing(maybe(None))
        assert not is_nothing(Some(None))


class TestFlatmap:
    """flatmap over Maybe, the four Some/Nothing combinations."""

    def test_some_to_some(self):
        value = flatmap(lambda x: Some(x))(Some(0))
        assert is_some(value)
        assert value.value == 0

    def test_nothing_to_nothing(self):
        assert not is_some(flatmap(lambda _: Nothing)(Nothing))

    def test_nothing_to_some(self):
        assert not is_some(flatmap(lambda x: Some(x))(Nothing))

    def test_some_to_nothing(self):
        assert not is_some(flatmap(lambda _: Nothing)(Some(0)))

    def test_alias(self):
        assert flatmap is chain


class TestSteps:
    """Each step delegates to the container's combinator."""

    def test_map_(self):
        assert map_(str.upper)(Ok("a")) == Ok("A")
        assert map_(str.upper)(Some("a")) == Some("A")

    def test_refine(self):
        assert refine(len)(Err("four")) == Err(4)
        assert refine(len)(Ok("four")) == Ok("four")

    def test_refine_passes_maybe_through(self):
        assert refine(len)(Some("four")) == Some("four")
        assert refine(len)(Nothing) is Nothing
        assert pipe(Some(1), refine(str), map_(lambda x: x + 1)) == Some(2)

    def test_unfold(self):
        assert unfold()(Ok(Ok(1))) == Ok(1)

    def test_check_result(self):
        assert check(lambda x: x > 0)(Ok(-1)) == Err(EMPTY)
        assert check(lambda x: x > 0, "neg")(Ok(-1)) == Err("neg")

    def test_check_maybe(self):
        assert check(lambda x: x > 0, "ignored")(Some(-1)) is Nothing

    def test_or_(self):
        assert or_(Ok(0))(Err("e")) == Ok(0)
        assert or_(Some(0))(Nothing) == Some(0)

    def test_or_else(self):
        assert or_else(lambda e: Ok(len(e)))(Err("abc")) == Ok(3)
        assert or_else(lambda: Some(0))(Nothing) == Some(0)

    def test_effects(self):
        seen: list[object] = []
        on_ok(seen.append)(Ok(1))
        on_ok(seen.append)(Some(2))
        on_err(seen.append)(Err(3))
        on_err(lambda: seen.append(4))(Nothing)
        assert seen == [1, 2, 3, 4]


class TestPipe:
    """Tests for pipe()."""

    def test_plain_value_is_wrapped(self):
        assert pipe(5) == Ok(5)
        assert pipe(5, map_(lambda x: x + 1), map_(lambda x: x * 2)) == Ok(12)

    def test_result_pipeline(self):
        result = pipe(
            Ok(" 42 "),
            map_(str.strip),
            chain(parse_int),
            check(lambda n: n > 0, "not positive"),
        )
        assert result == Ok(42)

    def test_failure_short_circuits(self):
        result = pipe(
            "abc",
            chain(parse_int),
            map_(lambda n: n * 2),
            refine(str.upper),
        )
        assert result == Err("NOT A NUMBER: 'ABC'")

    def test_recovery_step(self):
        assert pipe(Err("e"), or_(Ok(0)), map_(lambda x: x + 1)) == Ok(1)

    def test_maybe_pipeline(self):
        def half(x: int) -> Maybe[int]:
            return Some(x // 2) if x % 2 == 0 else Nothing

        assert pipe(Some(8), chain(half), chain(half)) == Some(2)
        assert pipe(Some(6), chain(half), chain(half)) is Nothing
