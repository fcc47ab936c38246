"""Runtime components: HTTP transport and batch retrieval."""
