"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants and environment variable names
- exceptions: Exception hierarchy for the configuration and factory layers
"""
