"""Timed operations: the single unit of work timed per workload iteration."""
