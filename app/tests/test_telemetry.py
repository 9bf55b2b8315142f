import pytest
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

from app.utils.telemetry import _to_float


@pytest.mark.parametrize(
    "raw,expected",
    [("0.25", 0.25), (0.5, 0.5), ("1.5", 1.0), ("-0.2", 0.0), (None, 1.0), ("abc", 1.0)],
)
def test_sample_ratio_is_clamped(raw, expected):
    assert _to_float(raw) == expected


def test_out_of_range_ratio_still_builds_a_sampler():
    TraceIdRatioBased(_to_float("1.5"))

