"""Numerical constants shared by the analyzer components."""

# Small disturbance around a value; keeps rates away from 0 and saturation
EPSILON = 0.001

# Fraction below maximum throughput used as the throughput operating ceiling
STABILITY_SAFETY_FRACTION = 0.1

# Rates are per second externally and per millisecond internally
RATE_SCALE = 1000.0
