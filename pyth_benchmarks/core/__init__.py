"""Core components of the Benchmarks client."""
