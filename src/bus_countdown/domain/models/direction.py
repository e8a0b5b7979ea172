"""Direction vocabulary shared by every route and stop."""

DIRECTIONS: tuple[str, ...] = ("Inbound", "Outbound", "North", "South", "East", "West")
