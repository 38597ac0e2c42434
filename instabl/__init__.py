"""
instabl - Go package instability analyzer

Statically reads the import declarations of a Go repository and reports,
per package, how exposed it is to change: fan-out / (fan-in + fan-out).
"""

__version__ = "0.1.0"
