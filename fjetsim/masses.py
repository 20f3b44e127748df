"""Share of the total aircraft mass carried by each named part."""

from __future__ import annotations

MASS_FRACTIONS: dict[str, float] = {
    "Fuselage": 0.17,
    "Nose": 0.04,
    "Cockpit": 0.07,
    "UpperFuselage": 0.18,
    "Engines": 0.18,
    "Wings": 0.14,
    "LeftAileron": 0.01,
    "RightAileron": 0.01,
    "LeftFlap": 0.01,
    "RightFlap": 0.01,
    "LeftElevator": 0.01,
    "RightElevator": 0.01,
    "Rudders": 0.04,
    "LeftRudder": 0.02,
    "RightRudder": 0.02,
    "Canopy": 0.07,
    "Airbrake": 0.01,
}


def total_fraction() -> float:
    """Sum of all part fractions; it is 1 within rounding."""
    return sum(MASS_FRACTIONS.values())


if not 0.999 < total_fraction() < 1.001:
    raise RuntimeError("mass fractions must add up to 1")