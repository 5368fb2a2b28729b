"""Run the FlatWiki server: ``python -m flatwiki``."""

from flatwiki.main import run

run()
