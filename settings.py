"""
Configuration for the CommandBot project.
"""

import os

# Model configuration
MODEL_NAME = os.getenv("COMMANDBOT_MODEL", "llama3")  # Any model pulled into the local Ollama server
OLLAMA_URL = os.getenv("COMMANDBOT_OLLAMA_URL", "http://localhost:11434/api/generate")

# File paths
LOG_FILE = "bot.log"
