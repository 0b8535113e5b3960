# tests/property/__init__.py
"""Property-based tests for telemetry_metrics.

Property-based testing validates invariants that must hold for ALL inputs,
not just the specific examples we think of. Descriptors are shared by every
reporter, so compilation must be deterministic and conversions exact.

Test categories:
- core/: Name resolution, unit ratios, bucket expansion, compilation
"""
