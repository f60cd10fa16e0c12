# slushfind

Search the SLH-DSA parameter space for parameter sets that support a limited
number of signatures at a target security level, and rank them by signature
size and cost.

## Installation

```
pip install .
```

## Command line

```
slushfind
```

The command walks every combination of XMSS tree height h' (1–30), layer
count d (1–30), Winternitz parameter lg w (1–8), FORS set count k (1–30) and
FORS tree height a (1–30). It keeps the candidates whose signature size,
signing cost and verification cost pass the limits below and that still reach
the target security level after the minimum number of signatures. It then
prints the 20 best ones, ranked by a weighted sum of the logarithms of
signature size, signing hashes and verification hashes.

Every option can be written with one or two leading dashes.

| option | default | meaning |
| --- | --- | --- |
| `--target_security_level` | 128 | target security in bits |
| `--fallback_security_level` | 112 | level used for the "sigs at" column |
| `--min_sig_count` | 20.0 | log2 of the minimum signature count at full security |
| `--max_sig_size` | 4000 | maximum signature size in bytes (inclusive) |
| `--min_sig_hashes` | 900000000 | lower bound (exclusive) on signing hashes |
| `--max_sig_hashes` | 2000000000 | upper bound (exclusive) on signing hashes |
| `--max_verify_hashes` | 2000 | upper bound (exclusive) on verification hashes |
| `--eval_sig_size` | 0.5 | weight of log(signature size) in the ranking |
| `--eval_sig_hashes` | 0.0 | weight of log(signing hashes) in the ranking |
| `--eval_verify_hashes` | 0.5 | weight of log(verification hashes) in the ranking |
| `--table_format` | console | `console`, `markdown` or `csv` (case-insensitive) |
| `--name_prefix` | (empty) | prefix for the id column |

The table has the columns id, h, d, h', a, k, w, m, sig bytes, sign time,
verify time and "sigs at N". The sign time is the signing hash count, shortened
with a K, M or B suffix. The last column is log2 of the number of signatures
that keep the fallback security level.

The console format prints the title line above a bordered table. The markdown
format prints the title as a heading above a table. The csv format prints only
the header and rows. An unknown table format or any positional argument is
reported on standard error, and the command exits with status 1.

Example:

```
slushfind --target_security_level 192 --fallback_security_level 128 --table_format markdown
```

The module can also be run with `python -m slushfind.cli`.

## Library use

```python
from slushfind.params import ParameterSet

p = ParameterSet(target_security_level=128, h_prime=5, d=4, lg_w=4, k=23, t=8)
p.hypertree_height()        # 20
p.m()                       # 26
p.signature_size()          # 5888
p.signature_hashes()        # 89576
p.verify_hashes()           # 1353
p.signatures_at_level(112)  # 21.69
```

`ParameterSet` also has `winternitz_digits()`, `security_level(m)` (bits of
security after 2^m signatures) and `check_security_level(m)` (whether the
target level still holds after 2^m signatures).

For a custom search, give `slushfind.search.search` a
`slushfind.search.SearchParameters` value. It holds the value ranges, the
acceptance predicates for size, signing hashes and verification hashes, the
minimum signature count, a `compare(a, b)` function that returns True when `a`
is better, and `candidate_count`. The search returns at most
`candidate_count` candidates, best first. `SearchParameters.candidates()`
yields every combination in the space without filtering.

`slushfind.cli` offers `format_hashes(count)` and
`render_table(header, rows, title, table_format)`, which are used to build the
output table.

## What it does not do

The package only computes sizes, hash counts and security estimates for
parameter sets. It does not generate keys, sign or verify.

## Tests

```
pip install .[test]
pytest
```