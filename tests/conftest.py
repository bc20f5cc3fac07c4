"""Test configuration and fixtures."""

import os

import logfire

# bcrypt's minimum cost keeps registration fast in tests
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret-" + "0" * 32)

logfire.configure(send_to_logfire=False, console=False)
