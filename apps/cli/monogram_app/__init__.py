"""Command line app for the monogram avatar renderer."""
