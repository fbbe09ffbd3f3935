"""Domain layer - contracts, ports and exceptions shared by all demonstrations."""
