"""Small numeric helpers."""


def map_range(val, in_min, in_max, out_min, out_max):
    """Linearly map ``val`` from ``[in_min, in_max]`` onto ``[out_min, out_max]``."""
    return ((val - in_min) * (out_max - out_min) / (in_max - in_min)) + out_min