import pytest

from dojodraw.models import AgeBand, Category, Entrant, Group, Sex, WeightBand


def make_entrant(name, age=10, sex="M", weight=45.0, category="Kumite"):
    return Entrant(
        name=name, age=age, sex=Sex(sex), weight=weight, category=Category(category)
    )


def make_kumite_group(size, age_band=None, weight_band=None):
    age_band = age_band or AgeBand("Children", 8, 11)
    weight_band = weight_band or WeightBand("U50", 40.0, 50.0, Sex.MALE)
    entrants = [make_entrant(f"Fighter-{i:02d}") for i in range(1, size + 1)]
    return Group(
        category=Category.KUMITE,
        sex=weight_band.sex,
        entrants=tuple(entrants),
        age_band=age_band,
        weight_band=weight_band,
    )


class FirstIndexRandom:
    """Stand-in random source that always draws the lowest index."""

    def randint(self, a, b):
        return a


@pytest.fixture
def children_band():
    return AgeBand("Children", 8, 11)


@pytest.fixture
def male_u50():
    return WeightBand("U50", 40.0, 50.0, Sex.MALE)
