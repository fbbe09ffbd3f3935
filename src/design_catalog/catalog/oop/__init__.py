"""Object-oriented principle demonstrations."""
