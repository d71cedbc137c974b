"""Infrastructure: HTTP transport and token storage."""
