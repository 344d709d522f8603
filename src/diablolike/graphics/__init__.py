"""Camera, sprite sheets and the layered draw queue."""
