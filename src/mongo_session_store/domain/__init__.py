"""Domain layer for the session store."""
