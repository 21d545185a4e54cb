import pytest

from cardstack.utils import colors as colors_module
from cardstack.utils.colors import random_color, random_int


def test_random_int_covers_inclusive_range(monkeypatch):
    spans = []

    def fake_randrange(span):
        spans.append(span)
        return span - 1

    monkeypatch.setattr(colors_module.random, "randrange", fake_randrange)

    assert random_int(0, 255) == 255
    assert spans == [256]


def test_random_int_stays_in_bounds():
    values = {random_int(3, 5) for _ in range(200)}

    assert values <= {3, 4, 5}


@pytest.mark.parametrize("lower, upper", [(5, 5), (10, 2)])
def test_random_int_rejects_reversed_bounds(lower, upper):
    with pytest.raises(ValueError):
        random_int(lower, upper)


def test_random_color_is_opaque(monkeypatch):
    values = iter([10, 20, 30])
    monkeypatch.setattr(colors_module, "random_int", lambda lower, upper: next(values))

    color = random_color()

    assert (color.red(), color.green(), color.blue(), color.alpha()) == (10, 20, 30, 255)
