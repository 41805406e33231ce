from time import monotonic


def monotonic_ms() -> float:
    return monotonic() * 1000.0
