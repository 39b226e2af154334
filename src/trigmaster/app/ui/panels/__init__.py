"""Content panels shown under the main tab bar, one per tab."""
