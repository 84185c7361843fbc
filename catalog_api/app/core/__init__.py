"""
Core infrastructure: settings, logging, errors, responses and storage.
"""
