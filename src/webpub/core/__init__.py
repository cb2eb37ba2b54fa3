"""Publication readers."""
