from app.services.weather.units import celsius_to_fahrenheit, mps_to_mph, round_half_up


def test_celsius_to_fahrenheit_rounds_to_nearest():
    assert round_half_up(celsius_to_fahrenheit(21.0)) == 70
    assert round_half_up(celsius_to_fahrenheit(20.0)) == 68
    assert round_half_up(celsius_to_fahrenheit(-40.0)) == -40


def test_wind_speed_one_decimal():
    assert f"{mps_to_mph(3.0):.1f}" == "6.7"
    assert f"{mps_to_mph(0.0):.1f}" == "0.0"


def test_round_half_up():
    assert round_half_up(87.6) == 88
    assert round_half_up(68.5) == 69
    assert round_half_up(-0.5) == 0
    assert round_half_up(55.0) == 55
