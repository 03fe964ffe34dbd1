#
# Vouch - Maybe Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import pickle

# Third party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from vouch.maybe import Maybe


# Tests ----------------------------------------------------------------------------------------------------------------


class TestMaybeFactories:
    def test_of_holds_value(self):
        """Wrap a present value."""
        m = Maybe.of("x")
        assert m.is_present() is True
        assert m.is_empty() is False
        assert m.get() == "x"

    def test_of_rejects_none(self):
        """Refuse None in Maybe.of()."""
        with pytest.raises(ValueError, match="of_nullable"):
            Maybe.of(None)

    @pytest.mark.parametrize(
        "value, present",
        [
            pytest.param(None, False, id="none"),
            pytest.param(0, True, id="falsy-zero"),
            pytest.param("", True, id="falsy-empty-str"),
        ],
    )
    def test_of_nullable(self, value, present):
        """Only None produces the empty Maybe."""
        assert Maybe.of_nullable(value).is_present() is present

    def test_empty_is_singleton(self):
        """Share one empty instance."""
        assert Maybe.empty() is Maybe.empty()
        assert Maybe.of_nullable(None) is Maybe.empty()


class TestMaybeQueries:
    def test_get_on_empty_raises(self):
        """Raise LookupError when nothing is held."""
        with pytest.raises(LookupError, match="no value present"):
            Maybe.empty().get()

    @pytest.mark.parametrize(
        "maybe, expected",
        [
            pytest.param(Maybe.of("x"), "x", id="present"),
            pytest.param(Maybe.empty(), "d", id="empty"),
        ],
    )
    def test_or_else(self, maybe, expected):
        """Fall back to the default only when empty."""
        assert maybe.or_else("d") == expected

    def test_bool(self):
        """Truthiness follows presence."""
        assert bool(Maybe.of(0)) is True
        assert bool(Maybe.empty()) is False


class TestMaybeDunders:
    def test_equality_and_hash(self):
        """Compare and hash by content."""
        assert Maybe.of(1) == Maybe.of(1)
        assert Maybe.of(1) != Maybe.of(2)
        assert Maybe.of(1) != Maybe.empty()
        assert hash(Maybe.of("a")) == hash(Maybe.of("a"))
        assert (Maybe.of(1) == 1) is False

    @pytest.mark.parametrize(
        "maybe, expected",
        [
            pytest.param(Maybe.of("x"), "Maybe('x')", id="present"),
            pytest.param(Maybe.empty(), "Maybe.empty()", id="empty"),
        ],
    )
    def test_repr(self, maybe, expected):
        """Show a clean representation."""
        assert repr(maybe) == expected

    def test_immutable(self):
        """Reject attribute assignment."""
        with pytest.raises(AttributeError, match="immutable"):
            Maybe.of(1)._value = 2

    def test_pickle_keeps_empty_singleton(self):
        """Unpickle the empty Maybe as the shared instance."""
        assert pickle.loads(pickle.dumps(Maybe.empty())) is Maybe.empty()
        assert pickle.loads(pickle.dumps(Maybe.of([1, 2]))) == Maybe.of([1, 2])
