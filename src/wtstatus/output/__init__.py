"""Status reporters — Rich terminal table and JSON."""
