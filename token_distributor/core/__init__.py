"""
Core modules for Token Distributor.

This package contains the cache token distribution and the usage
reporting built on top of it.
"""
