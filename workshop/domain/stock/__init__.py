"""Stock context, consumed through ports only."""
