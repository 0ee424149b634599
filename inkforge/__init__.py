"""InkForge: weighted deck generation for two-ink Lorcana decks."""
