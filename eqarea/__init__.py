"""EQAREA - draw a polygon on a map and drag it without changing its true area."""
