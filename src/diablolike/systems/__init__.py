"""World systems: spawning and the inventory."""
