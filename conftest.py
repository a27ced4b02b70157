"""
Configuration file for pytest.

This file defines pytest collection behavior, particularly
which files to ignore during test discovery.
"""

# Keep the packaging script out of test collection
collect_ignore = [
    "setup.py",
]
