"""research-intel: priced academic search entrypoints over Semantic Scholar."""

__version__ = "1.0.0"
