"""Use cases shared by the item and product catalogs."""
