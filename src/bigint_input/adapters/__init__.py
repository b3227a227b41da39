"""Host bindings for UI toolkits."""
