"""Members and orders: entities, ports and errors."""
