import logging
import math

logger = logging.getLogger("campaignguard.experiments.sample_size")

# Fixed z-scores for a two-sided alpha of 0.05 and power of 0.8.
Z_ALPHA = 1.96
Z_BETA = 0.84

DEFAULT_POWER = 0.8
DEFAULT_SIGNIFICANCE_LEVEL = 0.05


def calculate_sample_size(
    baseline_rate: float,
    minimum_detectable_effect: float,
    power: float = DEFAULT_POWER,
    significance_level: float = DEFAULT_SIGNIFICANCE_LEVEL,
) -> int:
    """
    Per-variant sample size for a two-proportion test (pooled variance).

    minimum_detectable_effect is relative: 0.1 means a 10% lift over the
    baseline rate. The z-scores are the fixed (0.8, 0.05) constants; other
    power/significance_level values are accepted but do not change the result.
    """
    if not 0 < baseline_rate < 1:
        raise ValueError(f"baseline_rate must be in (0, 1), got {baseline_rate}")
    if minimum_detectable_effect == 0:
        raise ValueError("minimum_detectable_effect must be non-zero")

    if power != DEFAULT_POWER or significance_level != DEFAULT_SIGNIFICANCE_LEVEL:
        logger.warning(
            f"calculate_sample_size uses fixed z-scores for power={DEFAULT_POWER}, "
            f"alpha={DEFAULT_SIGNIFICANCE_LEVEL}; got power={power}, alpha={significance_level}"
        )

    p1 = baseline_rate
    p2 = baseline_rate * (1 + minimum_detectable_effect)
    if not 0 < p2 < 1:
        raise ValueError(
            f"baseline_rate * (1 + minimum_detectable_effect) must be in (0, 1), got {p2}"
        )
    pooled = (p1 + p2) / 2

    numerator = (
        Z_ALPHA * math.sqrt(2 * pooled * (1 - pooled))
        + Z_BETA * math.sqrt(p1 * (1 - p1) + p2 * (1 - p2))
    ) ** 2
    denominator = (p2 - p1) ** 2

    return math.ceil(numerator / denominator)
