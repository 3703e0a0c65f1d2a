# Shared constants and helpers
