"""
Benchmark suite for jsonkit JSON writing performance.

Compares jsonkit against standard JSON libraries including:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures writing speed and memory usage across different document shapes.
"""
