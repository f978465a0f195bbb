"""Demo applications for the text and terminal frontends."""
