"""Kernel – error hierarchy and the access-control engine."""
