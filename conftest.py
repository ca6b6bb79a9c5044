"""Project-level pytest configuration."""

import os

from dotenv import load_dotenv

# Load test environment variables from .env.test in the project root, if present
dotenv_path = os.path.join(os.path.dirname(__file__), ".env.test")
if os.path.exists(dotenv_path):
    load_dotenv(dotenv_path=dotenv_path)
