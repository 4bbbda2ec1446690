import pytest

from flashcookie.messages import Flash, FlashMessage, Level


def test_levels_are_ordered_by_severity() -> None:
    assert Level.DEBUG < Level.INFO < Level.SUCCESS < Level.WARNING < Level.ERROR
    assert sorted([Level.ERROR, Level.DEBUG, Level.SUCCESS]) == [
        Level.DEBUG,
        Level.SUCCESS,
        Level.ERROR,
    ]
    assert Level.WARNING.label == "warning"


def test_push_preserves_insertion_order() -> None:
    flash = Flash().push(Level.DEBUG, "a").push(Level.ERROR, "b")
    assert list(flash) == [(Level.DEBUG, "a"), (Level.ERROR, "b")]


def test_push_returns_new_instance() -> None:
    empty = Flash()
    one = empty.info("Saved")
    two = one.warning("Careful")

    assert empty.is_empty()
    assert list(one) == [(Level.INFO, "Saved")]
    assert len(two) == 2


def test_shorthands_map_to_levels() -> None:
    flash = Flash().debug("d").info("i").success("s").warning("w").error("e")
    assert [level for level, _ in flash] == list(Level)


def test_iteration_is_restartable() -> None:
    flash = Flash().success("Profile updated")
    assert list(flash) == list(flash)
    level, text = next(iter(flash))
    assert (level, text) == (Level.SUCCESS, "Profile updated")


def test_emptiness_and_equality() -> None:
    assert Flash() == Flash()
    assert not Flash()
    assert Flash().info("x") == Flash((FlashMessage(Level.INFO, "x"),))
    assert Flash().info("x") != Flash().error("x")
    assert hash(Flash().info("x")) == hash(Flash().info("x"))


def test_int_level_is_coerced() -> None:
    assert list(Flash().push(2, "ok")) == [(Level.SUCCESS, "ok")]


@pytest.mark.parametrize(
    ("level", "text"),
    [(Level.INFO, b"bytes"), (Level.INFO, None), ("info", "text"), (True, "text")],
)
def test_push_rejects_wrong_types(level, text) -> None:
    with pytest.raises(TypeError):
        Flash().push(level, text)


def test_push_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        Flash().push(7, "nope")
