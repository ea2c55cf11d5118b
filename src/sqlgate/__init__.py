"""sqlgate: read-only SQL gate for AI agents."""
