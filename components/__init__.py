"""Workload generators and timing harness for pattern tables."""
