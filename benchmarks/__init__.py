"""Performance benchmarks for chirpz.

This package contains microbenchmarks for the transform hot path,
including per-backend Bluestein timings and direct evaluation for scale.
"""
