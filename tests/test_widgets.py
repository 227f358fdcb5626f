import pytest

from ui_lib.components.widgets import format_inr


@pytest.mark.parametrize(
    "amount, expected",
    [
        (0, "0"),
        (100, "100"),
        (4500.0, "4,500"),
        (125000, "1,25,000"),
        (1234567.5, "12,34,567.5"),
        (12345678, "1,23,45,678"),
        (-12345.6789, "-12,345.679"),
        (0.0005, "0.001"),
    ],
)
def test_format_inr(amount, expected):
    assert format_inr(amount) == expected
