"""Exhaustive search of the SLH-DSA parameter space."""

from __future__ import annotations

import bisect
import itertools
import math
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

from slushfind.params import ParameterSet


@dataclass
class SearchParameters:
    """Bounds and preferences that define a parameter search.

    ``compare(a, b)`` returns True when ``a`` is better than ``b``.
    """

    target_security_level: int
    min_signatures: float
    h_prime: Sequence[int]
    d: Sequence[int]
    lg_w: Sequence[int]
    k: Sequence[int]
    t: Sequence[int]
    signature_size: Callable[[int], bool]
    signature_hashes: Callable[[int], bool]
    verify_hashes: Callable[[int], bool]
    compare: Callable[[ParameterSet, ParameterSet], bool]
    candidate_count: int

    def candidates(self) -> Iterator[ParameterSet]:
        """Yield every parameter set in the search space."""
        for h_prime, d, lg_w, k, t in itertools.product(
            self.h_prime, self.d, self.lg_w, self.k, self.t
        ):
            yield ParameterSet(
                target_security_level=self.target_security_level,
                h_prime=h_prime,
                d=d,
                lg_w=lg_w,
                k=k,
                t=t,
            )

    def _accepts(self, candidate: ParameterSet) -> bool:
        return (
            self.signature_size(candidate.signature_size())
            and self.signature_hashes(candidate.signature_hashes())
            and self.verify_hashes(candidate.verify_hashes())
            and candidate.check_security_level(math.log2(self.min_signatures))
        )


def search(params: SearchParameters) -> list[ParameterSet]:
    """Return the best ``candidate_count`` acceptable parameter sets, best first."""
    result: list[ParameterSet] = []
    for candidate in params.candidates():
        if not params._accepts(candidate):
            continue
        if not result:
            result.append(candidate)
            continue
        index = bisect.bisect_left(
            range(len(result)),
            True,
            key=lambda i: params.compare(candidate, result[i]),
        )
        result.insert(index, candidate)
        del result[params.candidate_count:]
    return result