"""droidstrings test suite."""
