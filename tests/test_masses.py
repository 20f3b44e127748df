import pytest

from fjetsim.masses import MASS_FRACTIONS, total_fraction


def test_total_is_one():
    assert total_fraction() == pytest.approx(1.0, abs=1e-3)


def test_every_fraction_positive():
    assert all(f > 0.0 for f in MASS_FRACTIONS.values())


def test_total_covers_all_seventeen_parts_in_order():
    names = list(MASS_FRACTIONS)
    assert len(names) == 17
    assert names[0] == "Fuselage"
    assert names[-1] == "Airbrake"
    assert total_fraction() == pytest.approx(sum(MASS_FRACTIONS.values()))


def test_fuselage_share_of_total():
    assert MASS_FRACTIONS["Fuselage"] == pytest.approx(0.17)
    assert total_fraction() - MASS_FRACTIONS["Fuselage"] == pytest.approx(0.83, abs=1e-3)