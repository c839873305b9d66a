"""Core manifest protocol: patterns, filters, codec and the build goals."""
