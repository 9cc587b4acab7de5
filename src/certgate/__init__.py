"""certgate — hand a Let's Encrypt certificate to a restricted caller, and nothing else."""

__version__ = "0.1.0"
