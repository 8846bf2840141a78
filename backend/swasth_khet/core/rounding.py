from decimal import Decimal, ROUND_HALF_UP, localcontext


def round_half_up(value: float, places: int = 2) -> float:
    """
    Round half away from zero on the shortest decimal repr of `value`,
    so 2.675 -> 2.68 even though the binary float sits just below it.
    """
    d = Decimal(repr(value))
    if not d.is_finite():
        return value
    quantum = Decimal(1).scaleb(-places)
    # quantize fails once the result needs more digits than the context allows
    with localcontext() as ctx:
        ctx.prec = max(28, d.adjusted() + places + 2)
        return float(d.quantize(quantum, rounding=ROUND_HALF_UP))


def round_to_int(value: float) -> int:
    return int(round_half_up(value, 0))
