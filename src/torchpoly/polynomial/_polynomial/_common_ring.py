from torchpoly.polynomial._ring_mismatch_error import RingMismatchError
from torchpoly.ring import Ring

from ._polynomial import Polynomial


def common_ring(p: Polynomial, q: Polynomial) -> Ring:
    """Return the ring shared by ``p`` and ``q``.

    Raises
    ------
    RingMismatchError
        If the polynomials are bound to different rings.
    """
    if p.ring != q.ring:
        raise RingMismatchError(
            f"Cannot combine polynomials over {p.ring!r} and {q.ring!r}"
        )

    return p.ring
