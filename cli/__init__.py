"""avrinfo command line interface."""
