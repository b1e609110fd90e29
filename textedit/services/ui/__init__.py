"""Qt views, ports and adapters."""
