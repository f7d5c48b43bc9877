"""Flask JSON API and a one-page UI on top of subtlex.Norms."""
