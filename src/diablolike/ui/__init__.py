"""Screen-space UI: HUD, inventory view and floating combat text."""
