"""Tag extraction and resolution."""
