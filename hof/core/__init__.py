"""
Core infrastructure for hof: configuration, logging, input validation.
"""
