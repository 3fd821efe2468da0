"""Go source parsing and type resolution."""
