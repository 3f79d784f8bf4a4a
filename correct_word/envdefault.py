# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""
Configurable parameters via environment variables
"""

import os

USER_HOME = os.path.expanduser("~")

CORRECT_WORD_CONFIG_DIR = os.environ.get("CORRECT_WORD_CONFIG_DIR", os.path.join(USER_HOME, ".config", "correct-word"))

CORRECT_WORD_ALGORITHM = os.environ.get("CORRECT_WORD_ALGORITHM") or None
CORRECT_WORD_CONFIG = os.environ.get("CORRECT_WORD_CONFIG", os.path.join(CORRECT_WORD_CONFIG_DIR, "correct-word.json"))
CORRECT_WORD_LOG_LEVEL = os.environ.get("CORRECT_WORD_LOG_LEVEL", "INFO")
