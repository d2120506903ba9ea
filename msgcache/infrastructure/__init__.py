"""Infrastructure: catalog providers and the Redis-backed message store."""
