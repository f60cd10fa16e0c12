"""SLH-DSA parameter sets: sizes, costs and security levels."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

_LN2 = math.log(2.0)
_LOG2_E = math.log2(math.e)


def _ceil_div(num: int, denom: int) -> int:
    """Return (num + denom - 1) / denom, truncated toward zero."""
    total = num + denom - 1
    quotient = abs(total) // denom
    return quotient if total >= 0 else -quotient


def _exp2(x: float) -> float:
    try:
        return 2.0**x
    except OverflowError:
        return math.inf


def _log2(x: float) -> float:
    if x == 0.0:
        return -math.inf
    return math.log2(x)


@dataclass
class ParameterSet:
    """The values needed to instantiate SLH-DSA.

    ``t`` is the exponent ``a`` such that each FORS set holds ``2**a`` values.
    """

    target_security_level: int
    h_prime: int
    d: int
    lg_w: int
    k: int
    t: int
    _cache: dict = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def hypertree_height(self) -> int:
        """Total height of the hypertree."""
        return self.h_prime * self.d

    def m(self) -> int:
        """Length in bytes of the message digest."""
        return (
            _ceil_div(self.hypertree_height() - self.h_prime, 8)
            + _ceil_div(self.h_prime, 8)
            + _ceil_div(self.k * self.t, 8)
        )

    def security_level(self, m: float) -> float:
        """Security level in bits after ``2**m`` signatures."""
        cached = self._cache.get("level")
        if cached is not None and cached[0] == m:
            return cached[1]
        result = self._compute_security_level(m)
        self._cache["level"] = (m, result)
        return result

    def _compute_security_level(self, m: float) -> float:
        height = self.hypertree_height()
        if m > height:
            lam = _exp2(m - height)
        else:
            lam = math.pow(0.5, height - m)
        log_lambda = m - height

        prob_not_single_hit = 1.0 - math.pow(0.5, self.t)
        prob_not_g_hit = 1.0
        log_a = 0.0
        log_sum = 0.0

        g = 1
        while True:
            log_a += log_lambda
            log_a -= math.log2(g)
            prob_not_g_hit *= prob_not_single_hit

            if prob_not_g_hit < 0.00001:
                # Taylor expansion avoids cancellation when the probability is tiny.
                log_b = float(-self.k) * (
                    prob_not_g_hit / _LN2
                    + prob_not_g_hit * prob_not_g_hit / (2 * _LN2)
                )
            else:
                log_b = self.k * _log2(1 - prob_not_g_hit)

            if g == 1:
                log_sum = log_a + log_b
            else:
                log_sum = _log2(_exp2(log_sum) + _exp2(log_a + log_b))

            if g >= 10 and log_sum > 20 + log_a:
                break
            g += 1

        return lam * _LOG2_E - log_sum

    def check_security_level(self, m: float) -> bool:
        """Whether the target security level holds after ``2**m`` signatures."""
        cached = self._cache.get("check")
        if cached is not None and cached[0] == m:
            return cached[1]
        result = self._compute_security_level(m) >= float(self.target_security_level)
        self._cache["check"] = (m, result)
        return result

    def signatures_at_level(self, target: int) -> float:
        """log2 of the number of signatures that keep ``target`` bits of security."""
        lower = 0
        while self._compute_security_level(float(lower + 1)) > target:
            lower += 1
        fract = 0
        while (
            self._compute_security_level(float(lower) + fract / 100.0 + 0.005)
            > target
        ):
            fract += 1
        return float(lower) + fract / 100.0

    def winternitz_digits(self) -> int:
        """Number of Winternitz digits, message and checksum together."""
        hash_digits = _ceil_div(self.target_security_level, self.lg_w)
        w = 1 << self.lg_w
        max_sum = (w - 1) * hash_digits
        checksum_digits = 1
        prod = w
        while prod < max_sum:
            checksum_digits += 1
            prod *= w
        return hash_digits + checksum_digits

    def signature_size(self) -> int:
        """Size in bytes of a signature."""
        hash_size = (self.target_security_level + 7) // 8
        return hash_size * (
            1
            + self.k * (self.t + 1)
            + self.d * (self.winternitz_digits() + self.h_prime)
        )

    def signature_hashes(self) -> int:
        """Hash operations needed to produce a signature."""
        cost_ots = 1 + self.winternitz_digits() * (1 << self.lg_w)
        cost_hypertree = self.d * ((cost_ots + 1) * (1 << self.h_prime) - 1)
        cost_fors_tree = 3 * (1 << self.t) - 1
        return 3 + cost_hypertree + self.k * cost_fors_tree

    def verify_hashes(self) -> int:
        """Hash operations needed to verify a signature."""
        return (
            1
            + self.k * (self.t + 1)
            + 1
            + self.d
            * (
                self.winternitz_digits() * (1 << self.lg_w) // 2
                + 1
                + self.h_prime
            )
        )