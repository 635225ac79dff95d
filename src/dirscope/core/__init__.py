"""Core components: configuration, exceptions and the directory snapshot builder."""
