"""Constants for backtrack."""

CONFIG_FILENAME = "backtrack.toml"

# Selects every milestone in the catalog
ALL_MILESTONES = "*"
