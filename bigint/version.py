"""0.0.1.2026.1019.1830.00"""