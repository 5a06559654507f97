"""Constants used for YAML function configuration parsing."""

# General keys
NAME_KEY = "name"
DESCRIPTION_KEY = "description"

# Data mode keys
FILE_PATH_KEY = "file_path"

# Unity mode keys
UNITY_KEY = "unity"
BOUNDS_KEY = "bounds"
