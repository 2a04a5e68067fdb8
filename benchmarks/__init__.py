"""
Benchmark suite for jsonparser parsing performance.

Compares jsonparser against established JSON libraries including:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures parsing speed and memory usage across different data types.
"""
