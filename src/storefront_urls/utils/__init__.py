"""URL utilities: query codec, path tokens, builders and resolvers."""
