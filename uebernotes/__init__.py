"""Note-taking app: books of notes in SQLite, with a command line and a curses terminal interface."""

__version__ = "0.1.0"