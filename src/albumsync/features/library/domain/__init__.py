"""Library records, naming heuristics and errors."""
