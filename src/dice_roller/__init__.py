"""Single-endpoint HTTP service returning random dice rolls."""
