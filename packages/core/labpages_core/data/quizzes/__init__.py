"""Quiz banks and the rules that pick between them."""
