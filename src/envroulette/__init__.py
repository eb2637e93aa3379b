"""
env-roulette Package

Sanity-checks a project's local environment file before you run or deploy.

PIPELINE:
---------
    Locate  - first existing of .env, .env.local, .env.development, .env.production
    Parse   - KEY=VALUE lines, comments and blanks skipped
    Analyze - empty values, unquoted spaces, weak secrets
    Report  - masked listing, warnings, confidence score

This package READS env files only. It never writes them and never touches
the process environment.
"""

__version__ = "0.1.0"
