"""Core infrastructure for ocflwalk.

This module contains the error hierarchy, configuration, paths,
logging setup and theming.
"""
