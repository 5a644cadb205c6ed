"""Grid engine and solvers for digit-grid puzzles."""
