"""Classic algorithms: number theory, primes, searching, containers and contest solvers."""

__version__ = "0.1.0"

__all__ = ["codechef", "containers", "number_theory", "primes", "searching"]