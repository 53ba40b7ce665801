"""
Spoiler reader core package.

Turns the markdown-like spoiler explanation produced for a movie into a typed
view: overview, story beats, character fates, key moments and interpretations.
The parsing subsystem is pure and side-effect free; the `api` package and
`parsing_demo.py` are thin surfaces over it.
"""

__version__ = "0.1.0"
