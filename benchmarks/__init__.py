"""
Benchmark suite for rdjson parsing performance.

Compares the pure-Python recursive-descent parser against:
- Python standard library json
- orjson (Rust-backed)
- ujson (C-backed)

Measures parsing speed and peak memory across generated documents.
Run explicitly with ``pytest benchmarks``; not part of the default suite.
"""
