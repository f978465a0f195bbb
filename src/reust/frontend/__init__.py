"""Frontends that draw resolved trees: plain text and an interactive terminal."""
