"""Domain values: levels, messages, scopes and the error taxonomy."""
