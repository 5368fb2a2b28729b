"""FlatWiki: a minimal flat-file page editor."""
