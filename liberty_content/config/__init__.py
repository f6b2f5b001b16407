"""
Configuration package: runtime settings plus the static brand tables
(lexicon, personas, templates, seed knowledge sources).
"""
