"""ngconfig Core Package - configuration loading and exceptions.

Modules:
    config: Config file discovery, loading and cascading lookups
    exceptions: Core exception classes for error handling
"""
