"""
Test utilities package.

Provides the scripted harness session and helpers for running the
toyrobot module as a subprocess.
"""

from .process import HARNESS_EXPECTED, HARNESS_SCRIPT, REPO_ROOT, run_module

__all__ = [
    "HARNESS_SCRIPT",
    "HARNESS_EXPECTED",
    "REPO_ROOT",
    "run_module",
]
