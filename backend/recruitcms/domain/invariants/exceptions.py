class InvariantViolation(Exception):
    """Raised when submitted content breaks a domain rule (answered with 400)."""
